"""API router aggregating every endpoint module."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from content_hub.api.admin import router as admin_router
from content_hub.api.collections import router as collections_router
from content_hub.api.config_files import router as config_files_router
from content_hub.api.content import router as content_router
from content_hub.api.health import router as health_router
from content_hub.api.v1.assets import router as assets_router
from content_hub.api.v1.chat import router as chat_router
from content_hub.api.v1.sync import router as sync_router

router = APIRouter(default_response_class=JSONResponse)

router.include_router(health_router)
router.include_router(content_router)
router.include_router(collections_router)
router.include_router(admin_router)
router.include_router(config_files_router)
router.include_router(chat_router, prefix="/v1")
router.include_router(sync_router, prefix="/v1")
router.include_router(assets_router, prefix="/v1")
