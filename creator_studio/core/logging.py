import logging
import inspect
from creator_studio.core.config import get_settings

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Append `extra=` context as key=value pairs after the event name.

    Route and client events are logged as dotted names (`generate.start`)
    with their details in `extra`, which the default format would drop.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        if not context:
            return line
        pairs = " ".join(f"{k}={v!r}" for k, v in sorted(context.items()))
        return f"{line} {pairs}"


def configure_logging():
    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.basicConfig(level=level, handlers=[handler])


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger named for the caller module when `name` is None."""
    if name:
        return logging.getLogger(name)

    frame = inspect.stack()[1]
    module = inspect.getmodule(frame[0])
    mod_name = module.__name__ if module else "creator_studio"
    return logging.getLogger(mod_name)
