"""
API endpoints for crops
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.core.database import get_db
from agroflow.schemas import (
    CropCreate,
    CropCreatedResponse,
    CropResponse,
    CropUpdate,
    MessageResponse,
    MessageWithId,
    Paginated,
)
from agroflow.services import crops_service
from .pagination import Pagination

router = APIRouter(prefix="/crops", tags=["crops"])


@router.get("", response_model=Paginated[CropResponse])
async def list_crops(pagination: Pagination = Depends(), db: Session = Depends(get_db)):
    return crops_service.find_all(db, pagination.page, pagination.limit)


@router.get("/{crop_id}", response_model=CropResponse)
async def get_crop(crop_id: UUID, db: Session = Depends(get_db)):
    return crops_service.find_one(db, crop_id)


@router.post("", response_model=CropCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_crop(crop: CropCreate, db: Session = Depends(get_db)):
    return crops_service.create(db, crop)


@router.patch("/{crop_id}", response_model=MessageWithId)
async def update_crop(crop_id: UUID, crop: CropUpdate, db: Session = Depends(get_db)):
    return crops_service.update(db, crop_id, crop)


@router.delete("/{crop_id}", response_model=MessageResponse)
async def delete_crop(crop_id: UUID, db: Session = Depends(get_db)):
    """Delete a crop and every planting that references it"""
    return crops_service.remove(db, crop_id)
