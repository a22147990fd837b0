import base64
import itertools
import secrets
import string
import time
from typing import Optional

from creator_studio.core.config import Settings
from creator_studio.models.generation import (
    GenerationRequest,
    GenerationResult,
    GenerationStatus,
    VideoQuality,
)

_BASE36 = string.digits + string.ascii_lowercase
_job_counter = itertools.count()


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_job_id() -> str:
    """
    Build an opaque job id: random part + millisecond timestamp + process counter.
    The counter keeps ids distinct within the process even if two calls land
    in the same millisecond with the same random draw.
    """
    random_part = "".join(secrets.choice(_BASE36) for _ in range(6))
    stamp = _to_base36(time.time_ns() // 1_000_000)
    return f"vid_{random_part}{stamp}{_to_base36(next(_job_counter))}"


def encode_data_uri(content_type: Optional[str], payload: bytes) -> str:
    mime = content_type or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


def select_video_url(quality: VideoQuality, settings: Settings) -> str:
    if quality == VideoQuality.HD:
        return settings.FALLBACK_VIDEO_HD
    return settings.FALLBACK_VIDEO_STANDARD


def compose_message(request: GenerationRequest) -> str:
    return (
        f"Generated with {request.ai_mode} in {request.quality.value.upper()} "
        f"for a {request.video_type} ({request.aspect_ratio}) "
        f"targeting {request.duration}s runtime."
    )


def build_result(
    request: GenerationRequest,
    character_reference: Optional[str],
    settings: Settings,
) -> GenerationResult:
    # No rendering backend: every accepted job is ready immediately.
    return GenerationResult(
        job_id=new_job_id(),
        status=GenerationStatus.READY,
        quality=request.quality,
        video_url=select_video_url(request.quality, settings),
        thumbnail_url=settings.FALLBACK_THUMBNAIL,
        character_reference=character_reference,
        message=compose_message(request),
        synopsis=request.description,
    )
