import logging

from creator_studio.core.logging import ContextFormatter, get_logger


def _record(**extra):
    record = logging.makeLogRecord({"name": "creator_studio.test", "levelno": logging.INFO,
                                    "levelname": "INFO", "msg": "generate.start"})
    record.__dict__.update(extra)
    return record


def test_context_formatter_appends_extra():
    formatter = ContextFormatter("%(levelname)s %(message)s")
    line = formatter.format(_record(quality="hd", has_file=False))
    assert line == "INFO generate.start has_file=False quality='hd'"


def test_context_formatter_plain_record():
    formatter = ContextFormatter("%(levelname)s %(message)s")
    assert formatter.format(_record()) == "INFO generate.start"


def test_get_logger_names_caller_module():
    assert get_logger().name == __name__
    assert get_logger("studio").name == "studio"
