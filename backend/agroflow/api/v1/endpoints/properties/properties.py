"""
API endpoints for properties, scoped by the caller's role
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user
from agroflow.core.database import get_db
from agroflow.schemas import (
    MessageResponse,
    Paginated,
    PropertyCreate,
    PropertyCreatedResponse,
    PropertyDetailResponse,
    PropertyUpdate,
)
from agroflow.services import properties_service
from agroflow.services.authorization import CurrentUser
from ..pagination import Pagination

router = APIRouter()


@router.get("", response_model=Paginated[PropertyDetailResponse])
async def list_properties(
    pagination: Pagination = Depends(),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Own properties for farmers, every property for admins"""
    return properties_service.find_all(db, user, pagination.page, pagination.limit)


@router.get("/{property_id}", response_model=PropertyDetailResponse)
async def get_property(
    property_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.find_one(db, property_id, user)


@router.post("", response_model=PropertyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    prop: PropertyCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.create(db, prop, user)


@router.patch("/{property_id}", response_model=PropertyCreatedResponse)
async def update_property(
    property_id: UUID,
    prop: PropertyUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return properties_service.update(db, property_id, prop, user)


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a property with its harvests and crop plantings"""
    return properties_service.remove(db, property_id, user)
