# models/generation.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VideoQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class VideoType(str, Enum):
    AD = "ad"
    SHORTS = "shorts"
    VIDEO = "video"


class AspectRatio(str, Enum):
    SQUARE = "1:1"
    HORIZONTAL = "16:9"
    VERTICAL = "9:16"


class InputSource(str, Enum):
    UPLOAD = "upload"
    URL = "url"


class GenerationStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


ASPECT_RATIO_LABELS = {
    AspectRatio.SQUARE: "Square 1:1",
    AspectRatio.HORIZONTAL: "Horizontal 16:9",
    AspectRatio.VERTICAL: "Vertical 9:16",
}

VIDEO_TYPE_LABELS = {
    VideoType.AD: "Ad",
    VideoType.SHORTS: "Shorts Video",
    VideoType.VIDEO: "Longform Video",
}

DEFAULT_AI_MODE = "Veo3 (OpenAI)"
AI_MODES = (DEFAULT_AI_MODE, "Cinematic+", "Storyboard Pro")

DEFAULT_DURATION = 30
MIN_DURATION = 5
MAX_DURATION = 180
DURATION_STEP = 5


class GenerationRequest(BaseModel):
    """Normalized server-side view of a multipart generation submission.

    `video_type`, `aspect_ratio` and `ai_mode` are echoed into the summary
    message as sent; only `quality` selects behaviour.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str = ""
    quality: VideoQuality = VideoQuality.STANDARD
    ai_mode: str = Field(DEFAULT_AI_MODE, alias="aiMode")
    video_type: str = Field(VideoType.SHORTS.value, alias="videoType")
    duration: int = DEFAULT_DURATION
    aspect_ratio: str = Field(AspectRatio.VERTICAL.value, alias="aspectRatio")
    input_source: str = Field(InputSource.UPLOAD.value, alias="inputSource")
    character_image_url: str = Field("", alias="characterImageUrl")

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        return (v or "").strip()

    @field_validator("character_image_url", mode="before")
    @classmethod
    def default_url(cls, v):
        return v or ""

    @field_validator("quality", mode="before")
    @classmethod
    def normalize_quality(cls, v):
        v = (v or "").strip().lower()
        if v == VideoQuality.HD.value:
            return VideoQuality.HD
        return VideoQuality.STANDARD

    @field_validator("duration", mode="before")
    @classmethod
    def parse_duration(cls, v):
        try:
            return int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_DURATION


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    job_id: str = Field(..., alias="jobId")
    status: GenerationStatus
    quality: VideoQuality
    video_url: Optional[str] = Field(None, alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailUrl")
    character_reference: Optional[str] = Field(None, alias="characterReference")
    message: Optional[str] = None
    synopsis: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
