"""Farmer queries"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from agroflow.models import Farmer
from agroflow.utils.pagination import offset_for


def build(**fields) -> Farmer:
    return Farmer(**fields)


def add(db: Session, farmer: Farmer) -> Farmer:
    db.add(farmer)
    db.flush()
    return farmer


def find_by_id(db: Session, farmer_id: UUID) -> Optional[Farmer]:
    return db.query(Farmer).filter(Farmer.id == farmer_id).first()


def find_by_email(db: Session, email: str) -> Optional[Farmer]:
    return db.query(Farmer).filter(func.lower(Farmer.email) == email.lower()).first()


def find_by_cpf(db: Session, cpf: str) -> Optional[Farmer]:
    return db.query(Farmer).filter(Farmer.cpf == cpf).first()


def find_by_cnpj(db: Session, cnpj: str) -> Optional[Farmer]:
    return db.query(Farmer).filter(Farmer.cnpj == cnpj).first()


def find_page(db: Session, page: int, limit: int) -> Tuple[List[Farmer], int]:
    query = db.query(Farmer)
    total = query.count()
    rows = query.order_by(Farmer.created_at, Farmer.id).offset(offset_for(page, limit)).limit(limit).all()
    return rows, total


def delete_by_id(db: Session, farmer_id: UUID) -> int:
    return db.query(Farmer).filter(Farmer.id == farmer_id).delete(synchronize_session=False)
