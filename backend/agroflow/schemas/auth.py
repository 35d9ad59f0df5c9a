from uuid import UUID

from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    refreshToken: str


class UserSummary(BaseModel):
    id: UUID
    producer_name: str
    email: str
    role: str


class LoginResponse(BaseModel):
    token: str
    refreshToken: str
    user: UserSummary
