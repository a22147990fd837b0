from creator_studio.core.config import Settings
from creator_studio.models.generation import GenerationRequest, GenerationStatus, VideoQuality
from creator_studio.services.generation_service import (
    build_result,
    compose_message,
    encode_data_uri,
    new_job_id,
    select_video_url,
)


def test_new_job_id_shape_and_uniqueness():
    ids = [new_job_id() for _ in range(500)]
    assert all(i.startswith('vid_') and len(i) > 10 for i in ids)
    assert len(set(ids)) == len(ids)


def test_encode_data_uri():
    assert encode_data_uri('image/png', b'abc') == 'data:image/png;base64,YWJj'
    assert encode_data_uri(None, b'abc').startswith('data:application/octet-stream;base64,')


def test_select_video_url():
    settings = Settings(FALLBACK_VIDEO_STANDARD='std.mp4', FALLBACK_VIDEO_HD='hd.mp4')
    assert select_video_url(VideoQuality.HD, settings) == 'hd.mp4'
    assert select_video_url(VideoQuality.STANDARD, settings) == 'std.mp4'


def test_request_normalization():
    req = GenerationRequest.model_validate(
        {"description": "  Hi  ", "quality": " HD ", "duration": "abc", "characterImageUrl": " u "}
    )
    assert req.description == 'Hi'
    assert req.quality == VideoQuality.HD
    assert req.duration == 30
    assert req.character_image_url == ' u '

    assert GenerationRequest.model_validate({"quality": "ultra"}).quality == VideoQuality.STANDARD


def test_compose_message():
    req = GenerationRequest.model_validate(
        {"description": "x", "quality": "hd", "aiMode": "Storyboard Pro",
         "videoType": "video", "aspectRatio": "1:1", "duration": "120"}
    )
    assert compose_message(req) == (
        'Generated with Storyboard Pro in HD for a video (1:1) targeting 120s runtime.'
    )


def test_build_result_serializes_wire_names():
    settings = Settings(FALLBACK_THUMBNAIL='thumb.jpg')
    req = GenerationRequest.model_validate({"description": "Story", "inputSource": "url"})
    result = build_result(req, 'https://example.com/c.png', settings)
    assert result.status == GenerationStatus.READY.value
    body = result.model_dump(by_alias=True)
    assert body['thumbnailUrl'] == 'thumb.jpg'
    assert body['characterReference'] == 'https://example.com/c.png'
    assert body['synopsis'] == 'Story'
    assert body['status'] == 'ready'
