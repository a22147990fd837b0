from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from creator_studio.core.config import get_settings
from creator_studio.core.errors import GenerationValidationError
from creator_studio.core.logging import get_logger
from creator_studio.models.generation import (
    ErrorResponse,
    GenerationRequest,
    GenerationResult,
    InputSource,
)
from creator_studio.services.generation_service import build_result, encode_data_uri

router = APIRouter()
log = get_logger()


def _has_file(upload: Optional[UploadFile]) -> bool:
    # Browsers send an empty part with no filename when nothing was chosen.
    return upload is not None and bool(upload.filename)


def _validate(request: GenerationRequest, upload: Optional[UploadFile]) -> None:
    if not request.description:
        raise GenerationValidationError("Overall description is required.")

    if request.input_source == InputSource.UPLOAD.value:
        if not _has_file(upload):
            raise GenerationValidationError("Character image upload is required.")
    elif request.input_source == InputSource.URL.value:
        if not request.character_image_url.strip():
            raise GenerationValidationError("Character image URL is required.")


async def _resolve_character_reference(
    request: GenerationRequest, upload: Optional[UploadFile]
) -> Optional[str]:
    # The URL is echoed exactly as sent; other sources carry no reference.
    if request.input_source == InputSource.UPLOAD.value:
        payload = await upload.read()
        return encode_data_uri(upload.content_type, payload)
    if request.input_source == InputSource.URL.value:
        return request.character_image_url
    return None


@router.post(
    "/generate",
    response_model=GenerationResult,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}},
)
async def generate_video(
    description: Optional[str] = Form(None),
    quality: Optional[str] = Form(None),
    ai_mode: Optional[str] = Form(None, alias="aiMode"),
    video_type: Optional[str] = Form(None, alias="videoType"),
    duration: Optional[str] = Form(None),
    aspect_ratio: Optional[str] = Form(None, alias="aspectRatio"),
    input_source: Optional[str] = Form(None, alias="inputSource"),
    character_image_url: Optional[str] = Form(None, alias="characterImageUrl"),
    character_image: Optional[UploadFile] = File(None, alias="characterImage"),
):
    """
    Accept a character video submission and return a placeholder job result.
    """
    submitted = {
        "description": description,
        "quality": quality,
        "aiMode": ai_mode,
        "videoType": video_type,
        "duration": duration,
        "aspectRatio": aspect_ratio,
        "inputSource": input_source,
        "characterImageUrl": character_image_url,
    }
    request = GenerationRequest.model_validate(
        {k: v for k, v in submitted.items() if v is not None}
    )

    log.info(
        "generate.start",
        extra={
            "input_source": request.input_source,
            "quality": request.quality.value,
            "video_type": request.video_type,
            "has_file": _has_file(character_image),
        },
    )

    try:
        _validate(request, character_image)
    except GenerationValidationError as e:
        log.warning("generate.rejected", extra={"reason": e.message})
        raise

    try:
        reference = await _resolve_character_reference(request, character_image)
        result = build_result(request, reference, get_settings())
    except Exception:
        log.exception(
            "generate.failed",
            extra={"input_source": request.input_source},
        )
        raise HTTPException(
            status_code=500,
            detail="Video generation failed",
        )

    log.info(
        "generate.success",
        extra={
            "job_id": result.job_id,
            "quality": request.quality.value,
            "reference_len": len(reference or ""),
        },
    )
    return result
