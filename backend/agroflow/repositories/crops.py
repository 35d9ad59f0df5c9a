"""Crop queries"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from agroflow.models import Crop
from agroflow.utils.pagination import offset_for


def build(**fields) -> Crop:
    return Crop(**fields)


def add(db: Session, crop: Crop) -> Crop:
    db.add(crop)
    db.flush()
    return crop


def find_by_id(db: Session, crop_id: UUID) -> Optional[Crop]:
    return db.query(Crop).filter(Crop.id == crop_id).first()


def find_by_name_ci(db: Session, crop_name: str) -> Optional[Crop]:
    return db.query(Crop).filter(func.lower(Crop.crop_name) == crop_name.strip().lower()).first()


def find_page(db: Session, page: int, limit: int) -> Tuple[List[Crop], int]:
    query = db.query(Crop)
    total = query.count()
    rows = query.order_by(Crop.crop_name, Crop.id).offset(offset_for(page, limit)).limit(limit).all()
    return rows, total


def delete_by_id(db: Session, crop_id: UUID) -> int:
    return db.query(Crop).filter(Crop.id == crop_id).delete(synchronize_session=False)
