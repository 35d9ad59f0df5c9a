"""
API endpoints for harvests
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user
from agroflow.core.database import get_db
from agroflow.schemas import (
    HarvestCreate,
    HarvestCreatedResponse,
    HarvestResponse,
    HarvestUpdate,
    MessageResponse,
    MessageWithId,
    Paginated,
)
from agroflow.services import harvests_service
from .pagination import Pagination

router = APIRouter(prefix="/harvests", tags=["harvests"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=Paginated[HarvestResponse])
async def list_harvests(pagination: Pagination = Depends(), db: Session = Depends(get_db)):
    return harvests_service.find_all(db, pagination.page, pagination.limit)


@router.get("/{harvest_id}", response_model=HarvestResponse)
async def get_harvest(harvest_id: UUID, db: Session = Depends(get_db)):
    return harvests_service.find_one(db, harvest_id)


@router.post("", response_model=HarvestCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_harvest(harvest: HarvestCreate, db: Session = Depends(get_db)):
    return harvests_service.create(db, harvest)


@router.patch("/{harvest_id}", response_model=MessageWithId)
async def update_harvest(harvest_id: UUID, harvest: HarvestUpdate, db: Session = Depends(get_db)):
    return harvests_service.update(db, harvest_id, harvest)


@router.delete("/{harvest_id}", response_model=MessageResponse)
async def delete_harvest(harvest_id: UUID, db: Session = Depends(get_db)):
    return harvests_service.remove(db, harvest_id)
