from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from .common import CommonResponse, NonEmptyStr, PartialUpdate


class HarvestBase(BaseModel):
    property_id: Optional[UUID] = None
    harvest_year: int = Field(..., ge=1900, le=2999)
    harvest_name: NonEmptyStr
    start_date: date
    end_date: date
    total_area_ha: Optional[float] = Field(None, ge=0)


class HarvestCreate(HarvestBase):
    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("Harvest end date cannot be before its start date")
        return self


class HarvestUpdate(PartialUpdate):
    nullable_fields = ("total_area_ha",)

    harvest_year: Optional[int] = Field(None, ge=1900, le=2999)
    harvest_name: Optional[NonEmptyStr] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_area_ha: Optional[float] = Field(None, ge=0)


class HarvestResponse(CommonResponse, HarvestBase):
    pass


class HarvestCreatedResponse(BaseModel):
    message: str
    data: HarvestResponse
