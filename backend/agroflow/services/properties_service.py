"""
Service for properties and the compound harvest/crop operations on them.

Farmers only ever see and change their own properties; admins see all.
Every operation that returns a property returns the nested view built by
``transform_property``.
"""
import logging
from datetime import date, timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import NotFoundError, ValidationError
from agroflow.models import Crop, Harvest, Property
from agroflow.repositories import crops as crops_repo
from agroflow.repositories import farmers as farmers_repo
from agroflow.repositories import harvests as harvests_repo
from agroflow.repositories import properties as properties_repo
from agroflow.repositories import property_crop_harvest as links_repo
from agroflow.schemas.harvest import HarvestCreate
from agroflow.schemas.property import AddHarvestCropRequest, HarvestCropCreate, PropertyCreate, PropertyUpdate
from agroflow.utils.pagination import paginated
from . import crops_service, property_crop_harvest_service
from .authorization import CurrentUser, ensure_can_access
from .property_transform import transform_property
from .transaction import atomic

logger = logging.getLogger(__name__)

DEFAULT_CYCLE_DAYS = 180
FORBIDDEN_MESSAGE = "You do not have permission to access this property"


def check_areas(total_area_ha: float, arable_area_ha: float, vegetable_area_ha: float) -> None:
    if arable_area_ha + vegetable_area_ha > total_area_ha:
        raise ValidationError(
            f"The sum of arable area ({arable_area_ha} ha) and vegetable area ({vegetable_area_ha} ha) "
            f"cannot be greater than the total area ({total_area_ha} ha)."
        )


def _detail(db: Session, property_id: UUID):
    return transform_property(properties_repo.find_by_id_with_relations(db, property_id))


def _get_owned(db: Session, property_id: UUID, user: CurrentUser) -> Property:
    prop = properties_repo.find_by_id(db, property_id)
    if not prop:
        raise NotFoundError("Property not found")
    ensure_can_access(user, prop.farmer_id, FORBIDDEN_MESSAGE)
    return prop


def _get_property_harvest(db: Session, prop: Property, harvest_id: UUID) -> Harvest:
    """Load a harvest and make sure it belongs to the property."""
    harvest = harvests_repo.find_by_id(db, harvest_id)
    if not harvest:
        raise NotFoundError("Harvest not found")
    if harvest.property_id != prop.id and not links_repo.exists_link(db, prop.id, harvest.id):
        raise ValidationError("Harvest does not belong to this property")
    return harvest


def _link_crop(
    db: Session,
    prop: Property,
    harvest: Harvest,
    crop: Crop,
    planted_area_ha: float,
    planting_date: Optional[date],
    harvest_date: Optional[date],
) -> None:
    planting_date = planting_date or date.today()
    harvest_date = harvest_date or planting_date + timedelta(days=DEFAULT_CYCLE_DAYS)
    if harvest_date < planting_date:
        raise ValidationError("Harvest date cannot be before the planting date")

    property_crop_harvest_service.ensure_allocation(db, harvest, planted_area_ha)
    links_repo.add(
        db,
        links_repo.build(
            property_id=prop.id,
            harvest_id=harvest.id,
            crop_id=crop.id,
            planted_area_ha=planted_area_ha,
            planting_date=planting_date,
            harvest_date=harvest_date,
        ),
    )


def purge_property(db: Session, property_id: UUID) -> None:
    """Delete a property with its junction rows and harvests. No commit."""
    property_crop_harvest_service.remove_by_property_id(db, property_id)
    for harvest_id in harvests_repo.find_ids_by_property(db, property_id):
        # rows from other properties may still point at this property's harvests
        property_crop_harvest_service.remove_by_harvest_id(db, harvest_id)
    harvests_repo.delete_by_property_id(db, property_id)
    properties_repo.delete_by_id(db, property_id)


def create(db: Session, payload: PropertyCreate, user: CurrentUser):
    check_areas(payload.total_area_ha, payload.arable_area_ha, payload.vegetable_area_ha)

    data = payload.model_dump()
    if user.is_admin:
        data["farmer_id"] = data.get("farmer_id") or user.id
        if not farmers_repo.find_by_id(db, data["farmer_id"]):
            raise NotFoundError("Farmer not found")
    else:
        data["farmer_id"] = user.id

    with atomic(db, "creating property"):
        prop = properties_repo.add(db, properties_repo.build(**data))
        property_id = prop.id

    logger.info(f"Created property {property_id} for farmer {data['farmer_id']}")
    return {"message": "Property created successfully", "data": _detail(db, property_id)}


def find_all(db: Session, user: CurrentUser, page: int, limit: int):
    if user.is_admin:
        rows, total = properties_repo.find_page(db, page, limit)
    else:
        rows, total = properties_repo.find_page_by_farmer(db, user.id, page, limit)
    return paginated([transform_property(prop) for prop in rows], total, page, limit)


def find_one(db: Session, property_id: UUID, user: CurrentUser):
    _get_owned(db, property_id, user)
    return _detail(db, property_id)


def update(db: Session, property_id: UUID, payload: PropertyUpdate, user: CurrentUser):
    prop = _get_owned(db, property_id, user)
    data = payload.model_dump(exclude_unset=True)

    check_areas(
        data.get("total_area_ha", prop.total_area_ha),
        data.get("arable_area_ha", prop.arable_area_ha),
        data.get("vegetable_area_ha", prop.vegetable_area_ha),
    )

    with atomic(db, "updating property"):
        for field, value in data.items():
            setattr(prop, field, value)

    logger.info(f"Updated property {property_id}")
    return {"message": "Property updated successfully", "data": _detail(db, property_id)}


def remove(db: Session, property_id: UUID, user: CurrentUser):
    _get_owned(db, property_id, user)
    with atomic(db, "deleting property"):
        purge_property(db, property_id)
    logger.info(f"Deleted property {property_id}")
    return {"message": "Property deleted successfully"}


def add_harvest_crop(db: Session, property_id: UUID, payload: AddHarvestCropRequest, user: CurrentUser):
    prop = _get_owned(db, property_id, user)

    with atomic(db, "adding harvest crop"):
        if payload.harvest_id:
            harvest = _get_property_harvest(db, prop, payload.harvest_id)
        else:
            harvest = harvests_repo.add(
                db,
                harvests_repo.build(
                    property_id=prop.id,
                    harvest_name=payload.harvest_name,
                    harvest_year=payload.harvest_year,
                    start_date=payload.start_date,
                    end_date=payload.end_date,
                    total_area_ha=payload.total_area_ha,
                ),
            )

        if payload.crop_id:
            crop = crops_repo.find_by_id(db, payload.crop_id)
            if not crop:
                raise NotFoundError("Crop not found")
        else:
            crop = crops_service.find_or_create(db, payload.crop_name)

        _link_crop(
            db, prop, harvest, crop,
            payload.planted_area_ha, payload.planting_date, payload.harvest_date,
        )

    logger.info(f"Added crop to harvest on property {property_id}")
    return {"message": "Harvest crop added successfully", "data": _detail(db, property_id)}


def create_harvest(db: Session, property_id: UUID, payload: HarvestCreate, user: CurrentUser):
    prop = _get_owned(db, property_id, user)
    data = payload.model_dump()
    data["property_id"] = prop.id

    with atomic(db, "creating harvest"):
        harvest = harvests_repo.add(db, harvests_repo.build(**data))
        harvest_id = harvest.id

    logger.info(f"Created harvest {harvest_id} on property {property_id}")
    return {"message": "Harvest created successfully", "data": _detail(db, property_id)}


def create_crop(
    db: Session,
    property_id: UUID,
    harvest_id: UUID,
    payload: HarvestCropCreate,
    user: CurrentUser,
):
    prop = _get_owned(db, property_id, user)
    harvest = _get_property_harvest(db, prop, harvest_id)

    with atomic(db, "creating crop"):
        crop = crops_service.find_or_create(db, payload.crop_name)
        _link_crop(
            db, prop, harvest, crop,
            payload.planted_area_ha, payload.planting_date, payload.harvest_date,
        )

    logger.info(f"Planted crop {payload.crop_name} in harvest {harvest_id} on property {property_id}")
    return {"message": "Crop created successfully", "data": _detail(db, property_id)}


def remove_harvest(db: Session, property_id: UUID, harvest_id: UUID, user: CurrentUser):
    prop = _get_owned(db, property_id, user)
    _get_property_harvest(db, prop, harvest_id)

    with atomic(db, "removing harvest"):
        property_crop_harvest_service.remove_by_harvest_id(db, harvest_id)
        harvests_repo.delete_by_id(db, harvest_id)

    logger.info(f"Removed harvest {harvest_id} from property {property_id}")
    return {"message": "Harvest removed successfully", "data": _detail(db, property_id)}


def remove_crop(db: Session, property_id: UUID, harvest_id: UUID, crop_id: UUID, user: CurrentUser):
    prop = _get_owned(db, property_id, user)
    _get_property_harvest(db, prop, harvest_id)
    if not crops_repo.find_by_id(db, crop_id):
        raise NotFoundError("Crop not found")

    with atomic(db, "removing crop"):
        if not links_repo.delete_link(db, property_id, harvest_id, crop_id):
            raise NotFoundError("Crop not found in this harvest")
        # the crop row goes only once nothing else plants it
        if links_repo.count_by_crop_id(db, crop_id) == 0:
            crops_repo.delete_by_id(db, crop_id)

    logger.info(f"Removed crop {crop_id} from harvest {harvest_id} on property {property_id}")
    return {"message": "Crop removed successfully", "data": _detail(db, property_id)}
