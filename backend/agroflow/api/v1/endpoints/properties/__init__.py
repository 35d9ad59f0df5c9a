"""Properties Module - Router aggregation"""
from fastapi import APIRouter

from .properties import router as properties_router
from .harvest_crops import router as harvest_crops_router

router = APIRouter(tags=["properties"])

# The CRUD router owns the bare collection path, so the prefix goes on each include
router.include_router(properties_router, prefix="/properties")
router.include_router(harvest_crops_router, prefix="/properties")
