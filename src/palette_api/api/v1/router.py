"""API v1 router - combines all endpoint routers."""

from fastapi import APIRouter

from palette_api.api.v1.color import router as color_router

router = APIRouter()

router.include_router(color_router)
