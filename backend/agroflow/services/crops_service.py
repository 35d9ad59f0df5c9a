"""
Service for crops
"""
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import NotFoundError, ValidationError
from agroflow.models import Crop
from agroflow.repositories import crops as crops_repo
from agroflow.schemas.crop import CropCreate, CropUpdate
from agroflow.utils.pagination import paginated
from . import property_crop_harvest_service
from .transaction import atomic

logger = logging.getLogger(__name__)


def find_or_create(db: Session, crop_name: str) -> Crop:
    """Return the crop with this name (any case), adding it if missing. No commit."""
    crop = crops_repo.find_by_name_ci(db, crop_name)
    if crop:
        return crop
    return crops_repo.add(db, crops_repo.build(crop_name=crop_name.strip()))


def create(db: Session, payload: CropCreate):
    if crops_repo.find_by_name_ci(db, payload.crop_name):
        raise ValidationError("Crop already exists")

    with atomic(db, "creating crop"):
        crop = crops_repo.add(db, crops_repo.build(crop_name=payload.crop_name))

    db.refresh(crop)
    logger.info(f"Created crop {crop.id} ({crop.crop_name})")
    return {"message": "Crop created successfully", "data": crop}


def find_all(db: Session, page: int, limit: int):
    rows, total = crops_repo.find_page(db, page, limit)
    return paginated(rows, total, page, limit)


def find_one(db: Session, crop_id: UUID) -> Crop:
    crop = crops_repo.find_by_id(db, crop_id)
    if not crop:
        raise NotFoundError("Crop not found")
    return crop


def update(db: Session, crop_id: UUID, payload: CropUpdate):
    crop = find_one(db, crop_id)
    data = payload.model_dump(exclude_unset=True)

    if data.get("crop_name"):
        existing = crops_repo.find_by_name_ci(db, data["crop_name"])
        if existing and existing.id != crop.id:
            raise ValidationError("Crop already exists")

    with atomic(db, "updating crop"):
        for field, value in data.items():
            setattr(crop, field, value)

    logger.info(f"Updated crop {crop_id}")
    return {"message": "Crop updated successfully", "data": {"id": crop_id}}


def remove(db: Session, crop_id: UUID):
    find_one(db, crop_id)
    with atomic(db, "deleting crop"):
        removed_links = property_crop_harvest_service.remove_by_crop_id(db, crop_id)
        crops_repo.delete_by_id(db, crop_id)
    logger.info(f"Deleted crop {crop_id} and {removed_links} junction rows")
    return {"message": "Crop deleted successfully"}
