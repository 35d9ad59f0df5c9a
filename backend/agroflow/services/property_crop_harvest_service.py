"""
Service for the property/harvest/crop junction
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import NotFoundError, ValidationError
from agroflow.models import Harvest, PropertyCropHarvest
from agroflow.repositories import crops as crops_repo
from agroflow.repositories import harvests as harvests_repo
from agroflow.repositories import properties as properties_repo
from agroflow.repositories import property_crop_harvest as links_repo
from agroflow.schemas.property_crop_harvest import PropertyCropHarvestCreate, PropertyCropHarvestUpdate
from agroflow.utils.pagination import paginated
from .transaction import atomic

logger = logging.getLogger(__name__)


def ensure_allocation(
    db: Session,
    harvest: Harvest,
    planted_area_ha: float,
    exclude_id: Optional[UUID] = None,
) -> None:
    """Reject a planting that would exceed the harvest's declared total area"""
    if harvest.total_area_ha is None:
        return
    planted = links_repo.planted_area_for_harvest(db, harvest.id, exclude_id=exclude_id) + planted_area_ha
    if planted > harvest.total_area_ha:
        raise ValidationError(
            f"The planted area ({planted} ha) exceeds the total area of harvest "
            f"'{harvest.harvest_name}' ({harvest.total_area_ha} ha)."
        )


def _check_references(db: Session, property_id: UUID, harvest_id: UUID, crop_id: UUID) -> Harvest:
    if not properties_repo.find_by_id(db, property_id):
        raise NotFoundError("Property not found")
    harvest = harvests_repo.find_by_id(db, harvest_id)
    if not harvest:
        raise NotFoundError("Harvest not found")
    if not crops_repo.find_by_id(db, crop_id):
        raise NotFoundError("Crop not found")
    return harvest


def create(db: Session, payload: PropertyCropHarvestCreate):
    harvest = _check_references(db, payload.property_id, payload.harvest_id, payload.crop_id)
    ensure_allocation(db, harvest, payload.planted_area_ha)

    with atomic(db, "creating property crop harvest"):
        link = links_repo.add(db, links_repo.build(**payload.model_dump()))

    db.refresh(link)
    logger.info(f"Linked crop {link.crop_id} to harvest {link.harvest_id} on property {link.property_id}")
    return {"message": "Property crop harvest created successfully", "data": link}


def find_all(db: Session, page: int, limit: int):
    rows, total = links_repo.find_page(db, page, limit)
    return paginated(rows, total, page, limit)


def find_one(db: Session, link_id: UUID) -> PropertyCropHarvest:
    link = links_repo.find_by_id(db, link_id)
    if not link:
        raise NotFoundError("Property crop harvest not found")
    return link


def update(db: Session, link_id: UUID, payload: PropertyCropHarvestUpdate):
    link = find_one(db, link_id)
    data = payload.model_dump(exclude_unset=True)

    property_id = data.get("property_id", link.property_id)
    harvest_id = data.get("harvest_id", link.harvest_id)
    crop_id = data.get("crop_id", link.crop_id)
    harvest = _check_references(db, property_id, harvest_id, crop_id)

    planting_date = data.get("planting_date", link.planting_date)
    harvest_date = data.get("harvest_date", link.harvest_date)
    if planting_date and harvest_date and harvest_date < planting_date:
        raise ValidationError("Harvest date cannot be before the planting date")

    ensure_allocation(db, harvest, data.get("planted_area_ha", link.planted_area_ha), exclude_id=link.id)

    with atomic(db, "updating property crop harvest"):
        for field, value in data.items():
            setattr(link, field, value)

    logger.info(f"Updated property crop harvest {link_id}")
    return {"message": "Property crop harvest updated successfully", "data": {"id": link_id}}


def remove(db: Session, link_id: UUID):
    find_one(db, link_id)
    with atomic(db, "deleting property crop harvest"):
        links_repo.delete_by_id(db, link_id)
    logger.info(f"Deleted property crop harvest {link_id}")
    return {"message": "Property crop harvest deleted successfully"}


# Cascade helpers: run inside the caller's transaction, never commit

def remove_by_property_id(db: Session, property_id: UUID) -> int:
    return links_repo.delete_by_property_id(db, property_id)


def remove_by_harvest_id(db: Session, harvest_id: UUID) -> int:
    return links_repo.delete_by_harvest_id(db, harvest_id)


def remove_by_crop_id(db: Session, crop_id: UUID) -> int:
    return links_repo.delete_by_crop_id(db, crop_id)
