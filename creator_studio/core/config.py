import os
from dataclasses import dataclass

@dataclass
class Settings:
    APP_NAME: str = os.environ.get('APP_NAME', 'Creator Studio Video Service')
    LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
    FALLBACK_VIDEO_STANDARD: str = os.environ.get(
        'FALLBACK_VIDEO_STANDARD', 'https://storage.googleapis.com/coverr-main/mp4/Mt_Baker.mp4'
    )
    FALLBACK_VIDEO_HD: str = os.environ.get(
        'FALLBACK_VIDEO_HD', 'https://storage.googleapis.com/coverr-main/mp4/Mt_Baker.mp4'
    )
    FALLBACK_THUMBNAIL: str = os.environ.get(
        'FALLBACK_THUMBNAIL',
        'https://images.unsplash.com/photo-1498050108023-c5249f4df085?auto=format&fit=crop&w=1200&q=80',
    )
    STUDIO_API_URL: str = os.environ.get('STUDIO_API_URL', 'http://127.0.0.1:8000')
    PREVIEW_MAX_SIZE: int = int(os.environ.get('PREVIEW_MAX_SIZE', '512'))

def get_settings() -> Settings:
    return Settings()
