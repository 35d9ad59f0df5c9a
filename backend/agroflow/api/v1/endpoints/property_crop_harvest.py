"""
API endpoints for the property/harvest/crop junction
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user
from agroflow.core.database import get_db
from agroflow.schemas import (
    MessageResponse,
    MessageWithId,
    Paginated,
    PropertyCropHarvestCreate,
    PropertyCropHarvestCreatedResponse,
    PropertyCropHarvestResponse,
    PropertyCropHarvestUpdate,
)
from agroflow.services import property_crop_harvest_service
from .pagination import Pagination

router = APIRouter(
    prefix="/property-crop-harvest",
    tags=["property-crop-harvest"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=Paginated[PropertyCropHarvestResponse])
async def list_links(pagination: Pagination = Depends(), db: Session = Depends(get_db)):
    return property_crop_harvest_service.find_all(db, pagination.page, pagination.limit)


@router.get("/{link_id}", response_model=PropertyCropHarvestResponse)
async def get_link(link_id: UUID, db: Session = Depends(get_db)):
    return property_crop_harvest_service.find_one(db, link_id)


@router.post("", response_model=PropertyCropHarvestCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_link(link: PropertyCropHarvestCreate, db: Session = Depends(get_db)):
    return property_crop_harvest_service.create(db, link)


@router.patch("/{link_id}", response_model=MessageWithId)
async def update_link(link_id: UUID, link: PropertyCropHarvestUpdate, db: Session = Depends(get_db)):
    return property_crop_harvest_service.update(db, link_id, link)


@router.delete("/{link_id}", response_model=MessageResponse)
async def delete_link(link_id: UUID, db: Session = Depends(get_db)):
    return property_crop_harvest_service.remove(db, link_id)
