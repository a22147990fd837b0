# client/preview.py
import io
import os
import tempfile
from typing import Optional

from PIL import Image, UnidentifiedImageError

from creator_studio.core.logging import get_logger

log = get_logger()


class ImagePreview:
    """
    Temporary on-disk preview of an uploaded character image.

    The file lives until `release()` is called; the form controller releases
    it whenever the selection changes or the controller is closed.
    """

    def __init__(self, path: str):
        self.path: Optional[str] = path

    @classmethod
    def create(cls, data: bytes, max_size: int = 512) -> "ImagePreview":
        fd, path = tempfile.mkstemp(prefix="character_preview_", suffix=".png")
        try:
            with os.fdopen(fd, "wb") as fh:
                try:
                    with Image.open(io.BytesIO(data)) as img:
                        img.thumbnail((max_size, max_size))
                        img.save(fh, format="PNG")
                except (UnidentifiedImageError, OSError):
                    # Undecodable payloads are previewed as-is.
                    log.warning("preview.raw_copy", extra={"size": len(data)})
                    fh.seek(0)
                    fh.truncate()
                    fh.write(data)
        except BaseException:
            os.remove(path)
            raise
        log.debug("preview.created", extra={"path": path})
        return cls(path)

    @property
    def released(self) -> bool:
        return self.path is None

    def release(self) -> None:
        if self.path is None:
            return
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        log.debug("preview.released", extra={"path": self.path})
        self.path = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
