"""Color analysis API endpoints."""

import logging

from fastapi import APIRouter, Request
from starlette.datastructures import FormData, UploadFile
from starlette.formparsers import FormParser, MultiPartException, MultiPartParser

from palette_api.core.exceptions import (
    ExtractionError,
    InternalError,
    PaletteApiException,
    PayloadTooLargeError,
    ValidationError,
)
from palette_api.core.security import require_api_key
from palette_api.deps import ColorServiceDep, SettingsDep
from palette_api.schemas.base import ErrorResponse
from palette_api.schemas.color import AnalysisResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Color Analysis"])

CHUNK_SIZE = 1024 * 1024

UPLOAD_FORM_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "image": {"type": "string", "format": "binary"},
                        "key": {"type": "string"},
                    },
                    "required": ["image", "key"],
                }
            }
        },
    }
}


async def parse_form(request: Request, spool_limit: int) -> FormData:
    """Parse the upload form, keeping file parts in memory up to ``spool_limit``."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("multipart/form-data"):
            parser = MultiPartParser(request.headers, request.stream(), max_files=1, max_fields=16)
            # File parts only roll over to disk past this size, which the
            # body limit middleware never lets through.
            parser.spool_max_size = spool_limit
            return await parser.parse()
        if content_type.startswith("application/x-www-form-urlencoded"):
            return await FormParser(request.headers, request.stream()).parse()
    except MultiPartException as e:
        raise ValidationError(f"Invalid form body: {e.message}") from e
    return FormData()


async def read_upload(upload: UploadFile, limit: int) -> bytes:
    """Copy an upload into a bytes buffer, refusing anything over ``limit`` bytes."""
    buffer = bytearray()
    while chunk := await upload.read(CHUNK_SIZE):
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise PayloadTooLargeError(limit)
    return bytes(buffer)


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra=UPLOAD_FORM_SCHEMA,
)
async def analyze_image(
    request: Request,
    settings: SettingsDep,
    color_service: ColorServiceDep,
) -> AnalysisResult:
    """
    Analyze an uploaded image.

    Expects multipart fields ``image`` (file) and ``key``. Returns the
    dominant color and a palette of up to six colors, each with its nearest
    reference name, Chinese label and CSS3 standard name.
    """
    form = None
    try:
        form = await parse_form(request, settings.max_upload_bytes + settings.multipart_overhead_bytes)

        key = form.get("key")
        require_api_key(key if isinstance(key, str) else None, settings.api_key)

        image = form.get("image")
        if not isinstance(image, UploadFile):
            raise ValidationError("圖片未上傳 (Image not uploaded)", field="image")

        buffer = await read_upload(image, settings.max_upload_bytes)
        return await color_service.analyze(buffer)
    except ExtractionError:
        raise
    except PaletteApiException as e:
        color_service.events.log_rejection(e.code, e.message)
        raise
    except Exception as e:
        logger.exception("Error during color analysis")
        raise InternalError() from e
    finally:
        if form is not None:
            await form.close()
