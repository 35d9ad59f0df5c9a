"""
API endpoints for farmers
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user, require_admin
from agroflow.core.database import get_db
from agroflow.schemas import (
    FarmerCreate,
    FarmerPasswordUpdate,
    FarmerResponse,
    FarmerUpdate,
    MessageResponse,
    MessageWithId,
    Paginated,
)
from agroflow.services import farmers_service
from agroflow.services.authorization import CurrentUser
from .pagination import Pagination

router = APIRouter(prefix="/farmers", tags=["farmers"])


@router.get("", response_model=Paginated[FarmerResponse])
async def list_farmers(
    pagination: Pagination = Depends(),
    _: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """List all farmers (admin only)"""
    return farmers_service.find_all(db, pagination.page, pagination.limit)


@router.get("/{farmer_id}", response_model=FarmerResponse)
async def get_farmer(
    farmer_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return farmers_service.find_one(db, farmer_id, user)


@router.post("", response_model=MessageWithId, status_code=status.HTTP_201_CREATED)
async def create_farmer(farmer: FarmerCreate, db: Session = Depends(get_db)):
    """Public sign-up"""
    return farmers_service.create(db, farmer)


@router.patch("/{farmer_id}", response_model=MessageWithId)
async def update_farmer(
    farmer_id: UUID,
    farmer: FarmerUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return farmers_service.update(db, farmer_id, farmer, user)


@router.patch("/{farmer_id}/password", response_model=MessageWithId)
async def update_farmer_password(
    farmer_id: UUID,
    body: FarmerPasswordUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return farmers_service.update_password(db, farmer_id, body, user)


@router.delete("/{farmer_id}", response_model=MessageResponse)
async def delete_farmer(
    farmer_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a farmer together with their properties"""
    return farmers_service.remove(db, farmer_id, user)
