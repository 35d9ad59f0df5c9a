"""
API endpoints for authentication
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from agroflow.api.auth import get_current_user
from agroflow.core.database import get_db
from agroflow.schemas import FarmerResponse, LoginRequest, LoginResponse, RefreshRequest
from agroflow.services import auth_service
from agroflow.services.authorization import CurrentUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Exchange e-mail and password for an access/refresh token pair"""
    return auth_service.sign_in(db, str(credentials.email), credentials.password)


@router.post("/refresh", response_model=LoginResponse)
async def refresh(body: RefreshRequest, db: Session = Depends(get_db)):
    return auth_service.refresh(db, body.refreshToken)


@router.get("/profile", response_model=FarmerResponse)
async def profile(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Profile of the authenticated farmer"""
    return auth_service.get_profile(db, user.id)
