# creator_studio/main.py
import os
from dotenv import load_dotenv

# ------------------------------------------------------------------
# Load .env FIRST (before settings are read)
# ------------------------------------------------------------------
ENV_PATH = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", ".env")
)
load_dotenv(ENV_PATH)

# ------------------------------------------------------------------
# Imports AFTER env is loaded
# ------------------------------------------------------------------
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from creator_studio.core.config import get_settings
from creator_studio.core.errors import GenerationValidationError
from creator_studio.core.logging import configure_logging, get_logger
from creator_studio.api.v1.router import router as api_router

# ------------------------------------------------------------------
# Init
# ------------------------------------------------------------------
configure_logging()
settings = get_settings()
_logger = get_logger(__name__)

# ------------------------------------------------------------------
# FastAPI app
# ------------------------------------------------------------------
app = FastAPI(title=settings.APP_NAME)
app.include_router(api_router, prefix="/api")


# ------------------------------------------------------------------
# Error bodies: every failure is { "error": str }
# ------------------------------------------------------------------
@app.exception_handler(GenerationValidationError)
async def generation_validation_handler(request: Request, exc: GenerationValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:]) or "request"
    _logger.warning(
        "request.invalid",
        extra={"path": request.url.path, "field": field},
    )
    return JSONResponse(
        status_code=400,
        content={"error": f"Invalid value for '{field}': {first.get('msg', 'malformed request')}"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("creator_studio.main:app", host="0.0.0.0", port=8000, reload=True)
