"""Farmer (producer account) schemas"""
from typing import Literal, Optional

from pydantic import BaseModel, BeforeValidator, EmailStr, Field, model_validator
from typing_extensions import Annotated

from agroflow.utils.documents import is_valid_cnpj, is_valid_cpf, only_digits
from .common import CommonResponse, NonEmptyStr, PartialUpdate

Role = Literal["farmer", "admin"]


def _normalize_cpf(value: Optional[str]) -> Optional[str]:
    digits = only_digits(value)
    if not digits:
        return None
    if not is_valid_cpf(digits):
        raise ValueError("Invalid CPF format")
    return digits


def _normalize_cnpj(value: Optional[str]) -> Optional[str]:
    digits = only_digits(value)
    if not digits:
        return None
    if not is_valid_cnpj(digits):
        raise ValueError("Invalid CNPJ format")
    return digits


Cpf = Annotated[Optional[str], BeforeValidator(_normalize_cpf)]
Cnpj = Annotated[Optional[str], BeforeValidator(_normalize_cnpj)]


class FarmerCreate(BaseModel):
    cpf: Cpf = Field(None, description="CPF, 11 digits, punctuation allowed")
    cnpj: Cnpj = Field(None, description="CNPJ, 14 digits, punctuation allowed")
    producer_name: NonEmptyStr
    email: EmailStr
    password: NonEmptyStr
    phone: NonEmptyStr = Field(..., max_length=16)

    @model_validator(mode="after")
    def require_document(self):
        if not self.cpf and not self.cnpj:
            raise ValueError("Either CPF or CNPJ must be provided")
        return self


class FarmerUpdate(PartialUpdate):
    nullable_fields = ("cpf", "cnpj")

    cpf: Cpf = None
    cnpj: Cnpj = None
    producer_name: Optional[NonEmptyStr] = None
    email: Optional[EmailStr] = None
    phone: Optional[NonEmptyStr] = Field(None, max_length=16)
    role: Optional[Role] = None


class FarmerPasswordUpdate(BaseModel):
    password: NonEmptyStr


class FarmerResponse(CommonResponse):
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    producer_name: str
    email: str
    phone: str
    role: str
