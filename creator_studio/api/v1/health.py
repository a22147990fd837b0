from fastapi import APIRouter

from creator_studio.core.config import get_settings

router = APIRouter()

@router.get('/health')
async def health():
    return {"status": "ok", "service": get_settings().APP_NAME}
