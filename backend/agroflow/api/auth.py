"""Bearer-token guard for the API routes"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from agroflow.core.exceptions import UnauthorizedError
from agroflow.core.security import decode_token
from agroflow.models import ROLE_FARMER
from agroflow.services.authorization import CurrentUser, ensure_admin

# auto_error off so a missing header renders as our 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """Decode the access token from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Token not provided")

    claims = decode_token(credentials.credentials)
    try:
        user_id = UUID(str(claims["id"]))
    except ValueError as exc:
        raise UnauthorizedError("Invalid token") from exc

    user = CurrentUser(id=user_id, role=claims.get("role") or ROLE_FARMER)
    request.state.user = user
    return user


def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    ensure_admin(user)
    return user
