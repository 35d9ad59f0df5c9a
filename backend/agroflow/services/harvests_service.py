"""
Service for harvests (cultivation cycles)
"""
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import NotFoundError, ValidationError
from agroflow.models import Harvest
from agroflow.repositories import harvests as harvests_repo
from agroflow.repositories import properties as properties_repo
from agroflow.repositories import property_crop_harvest as links_repo
from agroflow.schemas.harvest import HarvestCreate, HarvestUpdate
from agroflow.utils.pagination import paginated
from . import property_crop_harvest_service
from .transaction import atomic

logger = logging.getLogger(__name__)


def create(db: Session, payload: HarvestCreate):
    if payload.property_id and not properties_repo.find_by_id(db, payload.property_id):
        raise NotFoundError("Property not found")

    with atomic(db, "creating harvest"):
        harvest = harvests_repo.add(db, harvests_repo.build(**payload.model_dump()))

    db.refresh(harvest)
    logger.info(f"Created harvest {harvest.id} ({harvest.harvest_name} {harvest.harvest_year})")
    return {"message": "Harvest created successfully", "data": harvest}


def find_all(db: Session, page: int, limit: int):
    rows, total = harvests_repo.find_page(db, page, limit)
    return paginated(rows, total, page, limit)


def find_one(db: Session, harvest_id: UUID) -> Harvest:
    harvest = harvests_repo.find_by_id(db, harvest_id)
    if not harvest:
        raise NotFoundError("Harvest not found")
    return harvest


def update(db: Session, harvest_id: UUID, payload: HarvestUpdate):
    harvest = find_one(db, harvest_id)
    data = payload.model_dump(exclude_unset=True)

    start_date = data.get("start_date", harvest.start_date)
    end_date = data.get("end_date", harvest.end_date)
    if start_date and end_date and end_date < start_date:
        raise ValidationError("Harvest end date cannot be before its start date")

    if data.get("total_area_ha") is not None:
        planted = links_repo.planted_area_for_harvest(db, harvest_id)
        if planted > data["total_area_ha"]:
            raise ValidationError(
                f"The total area ({data['total_area_ha']} ha) cannot be smaller than "
                f"the area already planted ({planted} ha)."
            )

    with atomic(db, "updating harvest"):
        for field, value in data.items():
            setattr(harvest, field, value)

    logger.info(f"Updated harvest {harvest_id}")
    return {"message": "Harvest updated successfully", "data": {"id": harvest_id}}


def remove(db: Session, harvest_id: UUID):
    find_one(db, harvest_id)
    with atomic(db, "deleting harvest"):
        removed_links = property_crop_harvest_service.remove_by_harvest_id(db, harvest_id)
        harvests_repo.delete_by_id(db, harvest_id)
    logger.info(f"Deleted harvest {harvest_id} and {removed_links} junction rows")
    return {"message": "Harvest deleted successfully"}
