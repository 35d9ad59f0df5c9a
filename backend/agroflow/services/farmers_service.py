"""
Service for farmers (producer accounts)
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from agroflow.core.security import hash_password
from agroflow.models import ROLE_FARMER, Farmer
from agroflow.repositories import farmers as farmers_repo
from agroflow.repositories import properties as properties_repo
from agroflow.schemas.farmer import FarmerCreate, FarmerPasswordUpdate, FarmerUpdate
from agroflow.utils.pagination import paginated
from . import properties_service
from .authorization import CurrentUser, ensure_can_access
from .transaction import atomic

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "You do not have permission to access this farmer"


def _check_unique(
    db: Session,
    email: Optional[str] = None,
    cpf: Optional[str] = None,
    cnpj: Optional[str] = None,
    exclude_id: Optional[UUID] = None,
) -> None:
    if email:
        existing = farmers_repo.find_by_email(db, email)
        if existing and existing.id != exclude_id:
            raise ValidationError("Farmer email already exists")
    for existing in (
        farmers_repo.find_by_cpf(db, cpf) if cpf else None,
        farmers_repo.find_by_cnpj(db, cnpj) if cnpj else None,
    ):
        if existing and existing.id != exclude_id:
            raise ValidationError("Farmer with this CPF or CNPJ already exists")


def create(db: Session, payload: FarmerCreate):
    data = payload.model_dump()
    data["email"] = str(data["email"])
    _check_unique(db, email=data["email"], cpf=data["cpf"], cnpj=data["cnpj"])

    data["password"] = hash_password(data["password"])
    data["role"] = ROLE_FARMER

    with atomic(db, "creating farmer"):
        farmer = farmers_repo.add(db, farmers_repo.build(**data))
        farmer_id = farmer.id

    logger.info(f"Created farmer {farmer_id}")
    return {"message": "Farmer created successfully", "data": {"id": farmer_id}}


def find_all(db: Session, page: int, limit: int):
    rows, total = farmers_repo.find_page(db, page, limit)
    return paginated(rows, total, page, limit)


def find_one(db: Session, farmer_id: UUID, user: Optional[CurrentUser] = None) -> Farmer:
    farmer = farmers_repo.find_by_id(db, farmer_id)
    if not farmer:
        raise NotFoundError("Farmer not found")
    if user is not None:
        ensure_can_access(user, farmer.id, FORBIDDEN_MESSAGE)
    return farmer


def update(db: Session, farmer_id: UUID, payload: FarmerUpdate, user: CurrentUser):
    farmer = find_one(db, farmer_id, user)
    data = payload.model_dump(exclude_unset=True)

    if "role" in data and data["role"] != farmer.role and not user.is_admin:
        raise ForbiddenError("Only admins can change roles")
    if data.get("email") is not None:
        data["email"] = str(data["email"])

    _check_unique(db, email=data.get("email"), cpf=data.get("cpf"), cnpj=data.get("cnpj"), exclude_id=farmer.id)
    if not data.get("cpf", farmer.cpf) and not data.get("cnpj", farmer.cnpj):
        raise ValidationError("Either CPF or CNPJ must be provided")

    with atomic(db, "updating farmer"):
        for field, value in data.items():
            if field in ("producer_name", "email", "phone", "role") and value is None:
                continue
            setattr(farmer, field, value)

    logger.info(f"Updated farmer {farmer_id}")
    return {"message": "Farmer updated successfully", "data": {"id": farmer_id}}


def update_password(db: Session, farmer_id: UUID, payload: FarmerPasswordUpdate, user: CurrentUser):
    farmer = find_one(db, farmer_id, user)
    with atomic(db, "updating farmer password"):
        farmer.password = hash_password(payload.password)
    logger.info(f"Password changed for farmer {farmer_id}")
    return {"message": "Password updated successfully", "data": {"id": farmer_id}}


def remove(db: Session, farmer_id: UUID, user: CurrentUser):
    find_one(db, farmer_id, user)
    with atomic(db, "deleting farmer"):
        for property_id in properties_repo.find_ids_by_farmer(db, farmer_id):
            properties_service.purge_property(db, property_id)
        farmers_repo.delete_by_id(db, farmer_id)
    logger.info(f"Deleted farmer {farmer_id}")
    return {"message": "Farmer deleted successfully"}
