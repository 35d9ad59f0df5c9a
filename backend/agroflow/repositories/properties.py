"""Property queries"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from agroflow.models import Property, PropertyCropHarvest
from agroflow.utils.pagination import offset_for

# harvests and the junction rows with their crop/harvest, as the nested view needs
_WITH_RELATIONS = (
    selectinload(Property.harvests),
    selectinload(Property.property_crop_harvests).selectinload(PropertyCropHarvest.crop),
    selectinload(Property.property_crop_harvests).selectinload(PropertyCropHarvest.harvest),
)


def build(**fields) -> Property:
    return Property(**fields)


def add(db: Session, prop: Property) -> Property:
    db.add(prop)
    db.flush()
    return prop


def find_by_id(db: Session, property_id: UUID) -> Optional[Property]:
    return db.query(Property).filter(Property.id == property_id).first()


def find_by_id_with_relations(db: Session, property_id: UUID) -> Optional[Property]:
    return db.query(Property).options(*_WITH_RELATIONS).filter(Property.id == property_id).first()


def _page(query, page: int, limit: int) -> Tuple[List[Property], int]:
    total = query.count()
    rows = (
        query.options(*_WITH_RELATIONS)
        .order_by(Property.farm_name, Property.id)
        .offset(offset_for(page, limit))
        .limit(limit)
        .all()
    )
    return rows, total


def find_page(db: Session, page: int, limit: int) -> Tuple[List[Property], int]:
    return _page(db.query(Property), page, limit)


def find_page_by_farmer(db: Session, farmer_id: UUID, page: int, limit: int) -> Tuple[List[Property], int]:
    return _page(db.query(Property).filter(Property.farmer_id == farmer_id), page, limit)


def find_ids_by_farmer(db: Session, farmer_id: UUID) -> List[UUID]:
    return [row.id for row in db.query(Property.id).filter(Property.farmer_id == farmer_id).all()]


def delete_by_id(db: Session, property_id: UUID) -> int:
    return db.query(Property).filter(Property.id == property_id).delete(synchronize_session=False)
