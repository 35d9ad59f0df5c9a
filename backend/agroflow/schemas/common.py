"""Shared schema pieces: timestamps, envelopes and pagination"""
from datetime import datetime
from typing import ClassVar, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator
from typing_extensions import Annotated

T = TypeVar("T")

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PartialUpdate(BaseModel):
    """PATCH body: fields may be omitted, but only ``nullable_fields`` may be sent as null"""

    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data):
        if isinstance(data, dict):
            for field, value in data.items():
                if value is None and field in cls.model_fields and field not in cls.nullable_fields:
                    raise ValueError(f"{field} cannot be null")
        return data


class CommonResponse(BaseModel):
    id: UUID
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")
    is_active: Optional[bool] = Field(None, serialization_alias="isActive")

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class IdData(BaseModel):
    id: UUID


class MessageWithId(MessageResponse):
    data: IdData


class Paginated(BaseModel, Generic[T]):
    data: List[T]
    total: int
    page: int
    lastPage: int
