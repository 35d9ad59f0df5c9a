"""
Harvests and crops managed from inside a property
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user
from agroflow.core.database import get_db
from agroflow.schemas import (
    AddHarvestCropRequest,
    HarvestCreate,
    HarvestCropCreate,
    PropertyCreatedResponse,
)
from agroflow.services import properties_service
from agroflow.services.authorization import CurrentUser

router = APIRouter()


@router.post("/{property_id}/harvest-crop", response_model=PropertyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_harvest_crop(
    property_id: UUID,
    body: AddHarvestCropRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Plant a crop in a harvest, creating the harvest and/or the crop when needed"""
    return properties_service.add_harvest_crop(db, property_id, body, user)


@router.post("/{property_id}/harvest", response_model=PropertyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_property_harvest(
    property_id: UUID,
    harvest: HarvestCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.create_harvest(db, property_id, harvest, user)


@router.post(
    "/{property_id}/harvest/{harvest_id}/crop",
    response_model=PropertyCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_harvest_crop(
    property_id: UUID,
    harvest_id: UUID,
    crop: HarvestCropCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.create_crop(db, property_id, harvest_id, crop, user)


@router.delete("/{property_id}/harvest/{harvest_id}", response_model=PropertyCreatedResponse)
async def remove_property_harvest(
    property_id: UUID,
    harvest_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.remove_harvest(db, property_id, harvest_id, user)


@router.delete("/{property_id}/harvest/{harvest_id}/crop/{crop_id}", response_model=PropertyCreatedResponse)
async def remove_harvest_crop(
    property_id: UUID,
    harvest_id: UUID,
    crop_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.remove_crop(db, property_id, harvest_id, crop_id, user)
