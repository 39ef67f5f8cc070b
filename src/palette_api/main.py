"""Palette API - image dominant color and palette service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from palette_api.api.v1 import router as api_v1_router
from palette_api.config import get_settings
from palette_api.core.exceptions import PaletteApiException
from palette_api.core.logging import AnalysisLogger
from palette_api.core.middleware import UploadLimitMiddleware
from palette_api.schemas.base import HealthResponse
from palette_api.services import ColorAnalyzerService, ColorNamer

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ANALYSIS_ERROR_MESSAGE = "發生錯誤 (An error occurred during analysis)"

STATUS_BY_CODE = {
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    current = get_settings()
    logger.info("Starting Palette API...")
    if not current.api_key:
        logger.warning("API_KEY is not set; every /analyze request will be rejected")

    events = AnalysisLogger(current.event_log_path)
    app.state.events = events
    app.state.color_service = ColorAnalyzerService(
        namer=ColorNamer(),
        events=events,
        palette_size=current.palette_size,
        quality=current.color_quality,
    )
    logger.info("Reference palette ready")

    yield
    logger.info("Shutting down Palette API...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
Palette API

Upload an image to get:
- its dominant color
- a palette of up to six representative colors
- the nearest reference name (English and Chinese) and CSS3 name for each
    """,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(UploadLimitMiddleware)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} "
        f"completed in {process_time:.2f} ms -> {response.status_code}"
    )
    return response


# Exception handlers
@app.exception_handler(PaletteApiException)
async def palette_exception_handler(request: Request, exc: PaletteApiException) -> JSONResponse:
    """Handle custom Palette API exceptions."""
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    message = exc.message if status_code < 500 else ANALYSIS_ERROR_MESSAGE
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and unsupported methods are both reported as 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not Found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed form bodies are client errors."""
    logger.info(f"Rejected malformed request: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unexpected error occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": ANALYSIS_ERROR_MESSAGE},
    )


# Health check endpoint
@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


app.include_router(api_v1_router)


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "palette_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
