import io
import os
import tempfile

import pytest
from PIL import Image

from creator_studio.client.preview import ImagePreview


def test_preview_thumbnail_and_release():
    buf = io.BytesIO()
    Image.new("RGB", (1024, 256)).save(buf, format="JPEG")
    with ImagePreview.create(buf.getvalue(), max_size=128) as preview:
        path = preview.path
        with Image.open(path) as img:
            assert img.size == (128, 32)
    assert preview.released
    assert not os.path.exists(path)


def test_undecodable_payload_copied_raw():
    preview = ImagePreview.create(b"not an image")
    with open(preview.path, "rb") as fh:
        assert fh.read() == b"not an image"
    preview.release()
    preview.release()
    assert preview.released


def test_failed_preview_leaves_no_temp_file(tmp_path, monkeypatch):
    buf = io.BytesIO()
    Image.new("RGB", (64, 48)).save(buf, format="PNG")
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(Image.DecompressionBombError):
        ImagePreview.create(buf.getvalue())
    assert list(tmp_path.iterdir()) == []
