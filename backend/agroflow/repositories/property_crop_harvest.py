"""Queries on the property/harvest/crop junction"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from agroflow.models import PropertyCropHarvest
from agroflow.utils.pagination import offset_for


def build(**fields) -> PropertyCropHarvest:
    return PropertyCropHarvest(**fields)


def add(db: Session, link: PropertyCropHarvest) -> PropertyCropHarvest:
    db.add(link)
    db.flush()
    return link


def find_by_id(db: Session, link_id: UUID) -> Optional[PropertyCropHarvest]:
    return db.query(PropertyCropHarvest).filter(PropertyCropHarvest.id == link_id).first()


def find_page(db: Session, page: int, limit: int) -> Tuple[List[PropertyCropHarvest], int]:
    query = db.query(PropertyCropHarvest)
    total = query.count()
    rows = (
        query.order_by(PropertyCropHarvest.planting_date, PropertyCropHarvest.id)
        .offset(offset_for(page, limit))
        .limit(limit)
        .all()
    )
    return rows, total


def count_by_property_id(db: Session, property_id: UUID) -> int:
    return db.query(PropertyCropHarvest).filter(PropertyCropHarvest.property_id == property_id).count()


def count_by_crop_id(db: Session, crop_id: UUID) -> int:
    return db.query(PropertyCropHarvest).filter(PropertyCropHarvest.crop_id == crop_id).count()


def exists_link(db: Session, property_id: UUID, harvest_id: UUID) -> bool:
    return (
        db.query(PropertyCropHarvest.id)
        .filter(
            PropertyCropHarvest.property_id == property_id,
            PropertyCropHarvest.harvest_id == harvest_id,
        )
        .first()
        is not None
    )


def planted_area_for_harvest(db: Session, harvest_id: UUID, exclude_id: Optional[UUID] = None) -> float:
    query = db.query(func.coalesce(func.sum(PropertyCropHarvest.planted_area_ha), 0)).filter(
        PropertyCropHarvest.harvest_id == harvest_id
    )
    if exclude_id is not None:
        query = query.filter(PropertyCropHarvest.id != exclude_id)
    return float(query.scalar() or 0)


def delete_by_id(db: Session, link_id: UUID) -> int:
    return db.query(PropertyCropHarvest).filter(PropertyCropHarvest.id == link_id).delete(synchronize_session=False)


def delete_by_property_id(db: Session, property_id: UUID) -> int:
    return (
        db.query(PropertyCropHarvest)
        .filter(PropertyCropHarvest.property_id == property_id)
        .delete(synchronize_session=False)
    )


def delete_by_harvest_id(db: Session, harvest_id: UUID) -> int:
    return (
        db.query(PropertyCropHarvest)
        .filter(PropertyCropHarvest.harvest_id == harvest_id)
        .delete(synchronize_session=False)
    )


def delete_by_crop_id(db: Session, crop_id: UUID) -> int:
    return (
        db.query(PropertyCropHarvest)
        .filter(PropertyCropHarvest.crop_id == crop_id)
        .delete(synchronize_session=False)
    )


def delete_link(db: Session, property_id: UUID, harvest_id: UUID, crop_id: UUID) -> int:
    return (
        db.query(PropertyCropHarvest)
        .filter(
            PropertyCropHarvest.property_id == property_id,
            PropertyCropHarvest.harvest_id == harvest_id,
            PropertyCropHarvest.crop_id == crop_id,
        )
        .delete(synchronize_session=False)
    )
