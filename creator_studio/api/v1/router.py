from fastapi import APIRouter
from . import health, generate

router = APIRouter()

# Generation is public: the form posts to it directly, no API key.
router.include_router(health.router, prefix="")
router.include_router(generate.router, prefix="")
