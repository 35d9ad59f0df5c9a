"""
API endpoints for the dashboard statistics
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from agroflow.api.auth import get_current_user, require_admin
from agroflow.schemas import AdminStatsResponse, DashboardFilters, FarmerStatsResponse
from agroflow.services import dashboard_service
from agroflow.services.authorization import CurrentUser, ensure_can_access

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def dashboard_filters(
    state: Optional[str] = Query(None, description="Exact state code, e.g. MT"),
    city: Optional[str] = Query(None),
    year: Optional[int] = Query(None, ge=0, description="Harvest year, 0 means no filter"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
) -> DashboardFilters:
    return DashboardFilters(state=state or None, city=city or None, year=year, page=page, limit=limit)


# Plain def: the service blocks on its worker pool
@router.get("/admin-stats", response_model=AdminStatsResponse)
def admin_stats(
    filters: DashboardFilters = Depends(dashboard_filters),
    _: CurrentUser = Depends(require_admin),
):
    return dashboard_service.get_admin_stats(filters)


@router.get("/farmer-stats", response_model=FarmerStatsResponse)
def farmer_stats(
    farmer_id: Optional[UUID] = Query(None, description="Admins only: inspect another farmer"),
    filters: DashboardFilters = Depends(dashboard_filters),
    user: CurrentUser = Depends(get_current_user),
):
    target_id = farmer_id or user.id
    ensure_can_access(user, target_id, "You do not have permission to view these statistics")
    return dashboard_service.get_farmer_stats(target_id, filters)
