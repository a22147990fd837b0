# client/form.py
"""
Form controller for the character video generator.

Holds the form state, validates it before anything is sent, posts the
multipart submission to `/api/generate` and keeps the returned result (or
the error to show) for display.
"""
import mimetypes
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import requests

from creator_studio.client.preview import ImagePreview
from creator_studio.core.config import Settings, get_settings
from creator_studio.core.logging import get_logger
from creator_studio.models.generation import (
    AI_MODES,
    ASPECT_RATIO_LABELS,
    VIDEO_TYPE_LABELS,
    DEFAULT_AI_MODE,
    DEFAULT_DURATION,
    DURATION_STEP,
    MAX_DURATION,
    MIN_DURATION,
    AspectRatio,
    GenerationResult,
    InputSource,
    VideoQuality,
    VideoType,
)

log = get_logger()

GENERATE_PATH = "/api/generate"

ERROR_NOT_AN_IMAGE = "Please choose an image file (PNG, JPG, WebP)."
ERROR_DESCRIPTION = "Describe the video so the generator knows what to render."
ERROR_UPLOAD = "Upload a character reference to continue."
ERROR_URL = "Provide a character image URL to continue."
ERROR_GENERIC = "Unable to generate video."
ERROR_BAD_RESULT = "Unable to read the generation result."


@dataclass(frozen=True)
class UploadSource:
    filename: str
    content_type: str
    data: bytes


@dataclass(frozen=True)
class UrlSource:
    url: str


CharacterSource = Union[UploadSource, UrlSource]


class FormController:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session=None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.STUDIO_API_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()

        self.description = ""
        self.quality = VideoQuality.STANDARD
        self.ai_mode = DEFAULT_AI_MODE
        self.video_type = VideoType.SHORTS
        self.aspect_ratio = AspectRatio.VERTICAL
        self._duration = DEFAULT_DURATION

        self._input_source = InputSource.UPLOAD
        self._upload: Optional[UploadSource] = None
        self._image_url = ""
        self._preview: Optional[ImagePreview] = None

        self.is_submitting = False
        self.result: Optional[GenerationResult] = None
        self.error: Optional[str] = None

    # ------------------------------------------------------------------
    # Character reference
    # ------------------------------------------------------------------
    @property
    def input_source(self) -> InputSource:
        return self._input_source

    def set_input_source(self, source: InputSource) -> None:
        self._input_source = InputSource(source)
        self.error = None
        self._refresh_preview()

    def select_file(self, filename: str, data: bytes, content_type: Optional[str] = None) -> bool:
        """Select an uploaded character image. Returns False when it is not an image."""
        content_type = content_type or mimetypes.guess_type(filename)[0] or ""
        if not content_type.startswith("image/"):
            self._upload = None
            self._refresh_preview()
            self.error = ERROR_NOT_AN_IMAGE
            return False

        self._upload = UploadSource(filename=filename, content_type=content_type, data=data)
        self.error = None
        self._refresh_preview()
        return True

    def select_file_path(self, path: str) -> bool:
        with open(path, "rb") as fh:
            data = fh.read()
        return self.select_file(path.replace("\\", "/").rsplit("/", 1)[-1], data)

    def clear_file(self) -> None:
        self._upload = None
        self.error = None
        self._refresh_preview()

    @property
    def image_url(self) -> str:
        return self._image_url

    def set_image_url(self, url: str) -> None:
        self._image_url = url
        self.error = None

    @property
    def character_source(self) -> Optional[CharacterSource]:
        """The authoritative character reference for the active input source."""
        if self._input_source == InputSource.UPLOAD:
            return self._upload
        url = self._image_url.strip()
        return UrlSource(url) if url else None

    @property
    def preview(self) -> Optional[str]:
        """Local preview path in upload mode, the trimmed URL in url mode."""
        if self._input_source == InputSource.UPLOAD:
            return self._preview.path if self._preview else None
        return self._image_url.strip() or None

    def _refresh_preview(self) -> None:
        if self._preview is not None:
            self._preview.release()
            self._preview = None
        if self._input_source == InputSource.UPLOAD and self._upload is not None:
            self._preview = ImagePreview.create(self._upload.data, self.settings.PREVIEW_MAX_SIZE)

    # ------------------------------------------------------------------
    # Scalar fields
    # ------------------------------------------------------------------
    @property
    def duration(self) -> int:
        return self._duration

    def set_duration(self, seconds: int) -> None:
        """Clamp into the slider range and snap to its step."""
        snapped = round(int(seconds) / DURATION_STEP) * DURATION_STEP
        self._duration = max(MIN_DURATION, min(MAX_DURATION, snapped))

    def set_ai_mode(self, mode: str) -> None:
        if mode not in AI_MODES:
            raise ValueError(f"Unknown AI mode: {mode}")
        self.ai_mode = mode

    @property
    def duration_label(self) -> str:
        minutes, seconds = divmod(self._duration, 60)
        parts = []
        if minutes:
            parts.append(f"{minutes}m")
        parts.append(f"{seconds}s")
        return " ".join(parts)

    @property
    def summary(self) -> Dict[str, str]:
        """Human-readable settings shown next to the result."""
        return {
            "format": ASPECT_RATIO_LABELS[AspectRatio(self.aspect_ratio)],
            "mode": self.ai_mode,
            "type": VIDEO_TYPE_LABELS[VideoType(self.video_type)],
            "duration": self.duration_label,
        }

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    def validate(self) -> Optional[str]:
        if not self.description.strip():
            return ERROR_DESCRIPTION
        source = self.character_source
        if self._input_source == InputSource.UPLOAD:
            if source is None or not source.content_type.startswith("image/"):
                return ERROR_UPLOAD
        elif source is None:
            return ERROR_URL
        return None

    def build_payload(self) -> Tuple[Dict[str, str], Dict[str, tuple]]:
        data = {
            "inputSource": self._input_source.value,
            "description": self.description.strip(),
            "quality": VideoQuality(self.quality).value,
            "aiMode": self.ai_mode,
            "videoType": VideoType(self.video_type).value,
            "duration": str(self._duration),
            "aspectRatio": AspectRatio(self.aspect_ratio).value,
        }
        files = {}
        source = self.character_source
        if isinstance(source, UploadSource):
            files["characterImage"] = (source.filename, source.data, source.content_type)
        elif isinstance(source, UrlSource):
            data["characterImageUrl"] = source.url
        return data, files

    def submit(self) -> Optional[GenerationResult]:
        """
        Validate and submit the form. Returns the result on success; on any
        failure returns None and leaves the message in `self.error`.
        """
        problem = self.validate()
        if problem:
            self.error = problem
            log.info("form.invalid", extra={"reason": problem})
            return None

        self.error = None
        self.result = None
        self.is_submitting = True
        try:
            data, files = self.build_payload()
            response = self.session.post(
                f"{self.base_url}{GENERATE_PATH}",
                data=data,
                files=files or None,
            )
            if not 200 <= response.status_code < 300:
                self.error = _error_message(response)
                log.warning(
                    "form.rejected",
                    extra={"status_code": response.status_code, "reason": self.error},
                )
                return None
            try:
                self.result = GenerationResult.model_validate(response.json())
            except ValueError:
                self.error = ERROR_BAD_RESULT
                log.exception("form.bad_result")
                return None
        except requests.RequestException as e:
            self.error = str(e) or ERROR_GENERIC
            log.warning("form.network_error", extra={"reason": self.error})
            return None
        finally:
            self.is_submitting = False

        log.info("form.submitted", extra={"job_id": self.result.job_id})
        return self.result

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._preview is not None:
            self._preview.release()
            self._preview = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def _error_message(response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return ERROR_GENERIC
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return ERROR_GENERIC
