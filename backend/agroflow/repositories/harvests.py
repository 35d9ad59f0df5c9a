"""Harvest queries"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.models import Harvest
from agroflow.utils.pagination import offset_for


def build(**fields) -> Harvest:
    return Harvest(**fields)


def add(db: Session, harvest: Harvest) -> Harvest:
    db.add(harvest)
    db.flush()
    return harvest


def find_by_id(db: Session, harvest_id: UUID) -> Optional[Harvest]:
    return db.query(Harvest).filter(Harvest.id == harvest_id).first()


def find_page(db: Session, page: int, limit: int) -> Tuple[List[Harvest], int]:
    query = db.query(Harvest)
    total = query.count()
    rows = (
        query.order_by(Harvest.harvest_year.desc(), Harvest.harvest_name, Harvest.id)
        .offset(offset_for(page, limit))
        .limit(limit)
        .all()
    )
    return rows, total


def delete_by_id(db: Session, harvest_id: UUID) -> int:
    return db.query(Harvest).filter(Harvest.id == harvest_id).delete(synchronize_session=False)


def delete_by_property_id(db: Session, property_id: UUID) -> int:
    return db.query(Harvest).filter(Harvest.property_id == property_id).delete(synchronize_session=False)


def find_ids_by_property(db: Session, property_id: UUID) -> List[UUID]:
    return [row.id for row in db.query(Harvest.id).filter(Harvest.property_id == property_id).all()]
