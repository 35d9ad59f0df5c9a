"""
Sign-in, token refresh and profile lookup
"""
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from agroflow.core.exceptions import UnauthorizedError
from agroflow.core.security import (
    REFRESH_TOKEN,
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_password,
)
from agroflow.models import Farmer
from agroflow.repositories import farmers as farmers_repo

logger = logging.getLogger(__name__)


def _issue_tokens(farmer: Farmer):
    claims = {"id": str(farmer.id), "role": farmer.role}
    return {
        "token": create_access_token(claims),
        "refreshToken": create_refresh_token(claims),
        "user": {
            "id": farmer.id,
            "producer_name": farmer.producer_name,
            "email": farmer.email,
            "role": farmer.role,
        },
    }


def sign_in(db: Session, email: str, password: str):
    farmer = farmers_repo.find_by_email(db, email)
    if not farmer or not verify_password(password, farmer.password):
        logger.warning("Sign-in rejected: invalid credentials")
        raise UnauthorizedError("Invalid credentials")
    if not farmer.is_active:
        logger.warning(f"Sign-in rejected: farmer {farmer.id} is inactive")
        raise UnauthorizedError("Account is inactive")

    logger.info(f"Farmer {farmer.id} signed in")
    return _issue_tokens(farmer)


def refresh(db: Session, refresh_token: str):
    claims = decode_token(refresh_token, expected_type=REFRESH_TOKEN)
    try:
        farmer_id = UUID(str(claims["id"]))
    except ValueError as exc:
        raise UnauthorizedError("Invalid token") from exc

    # re-read so role or status changes apply to the new pair
    farmer = farmers_repo.find_by_id(db, farmer_id)
    if not farmer or not farmer.is_active:
        raise UnauthorizedError("Invalid token")
    return _issue_tokens(farmer)


def get_profile(db: Session, farmer_id: UUID) -> Farmer:
    farmer = farmers_repo.find_by_id(db, farmer_id)
    if not farmer:
        raise UnauthorizedError("Farmer not found")
    return farmer
