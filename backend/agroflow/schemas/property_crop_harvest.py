from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from .common import CommonResponse, PartialUpdate


class PropertyCropHarvestBase(BaseModel):
    property_id: UUID
    harvest_id: UUID
    crop_id: UUID
    planted_area_ha: float = Field(..., gt=0)
    planting_date: date
    harvest_date: date


class PropertyCropHarvestCreate(PropertyCropHarvestBase):
    @model_validator(mode="after")
    def check_dates(self):
        if self.harvest_date < self.planting_date:
            raise ValueError("Harvest date cannot be before the planting date")
        return self


class PropertyCropHarvestUpdate(PartialUpdate):
    property_id: Optional[UUID] = None
    harvest_id: Optional[UUID] = None
    crop_id: Optional[UUID] = None
    planted_area_ha: Optional[float] = Field(None, gt=0)
    planting_date: Optional[date] = None
    harvest_date: Optional[date] = None


class PropertyCropHarvestResponse(CommonResponse, PropertyCropHarvestBase):
    pass


class PropertyCropHarvestCreatedResponse(BaseModel):
    message: str
    data: PropertyCropHarvestResponse
