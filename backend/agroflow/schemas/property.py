"""Property schemas, including the nested harvest -> crops view"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from .common import CommonResponse, NonEmptyStr, PartialUpdate


class PropertyBase(BaseModel):
    farm_name: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    total_area_ha: float = Field(..., ge=0, description="Total area in hectares")
    arable_area_ha: float = Field(..., ge=0, description="Arable area in hectares")
    vegetable_area_ha: float = Field(..., ge=0, description="Vegetation area in hectares")


class PropertyCreate(PropertyBase):
    # Ignored for farmer callers, who always create for themselves
    farmer_id: Optional[UUID] = None


class PropertyUpdate(PartialUpdate):
    farm_name: Optional[NonEmptyStr] = None
    city: Optional[NonEmptyStr] = None
    state: Optional[NonEmptyStr] = None
    total_area_ha: Optional[float] = Field(None, ge=0)
    arable_area_ha: Optional[float] = Field(None, ge=0)
    vegetable_area_ha: Optional[float] = Field(None, ge=0)


class HarvestCropEntry(BaseModel):
    id: UUID
    crop_id: UUID
    name: str
    planted_area_ha: float
    planting_date: Optional[date] = None
    harvest_date: Optional[date] = None


class HarvestTree(BaseModel):
    id: UUID
    name: str
    harvest_year: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_area_ha: Optional[float] = None
    crops: List[HarvestCropEntry] = Field(default_factory=list)


class PropertyResponse(CommonResponse, PropertyBase):
    farmer_id: UUID


class PropertyDetailResponse(PropertyResponse):
    harvests: List[HarvestTree] = Field(default_factory=list)


class PropertyCreatedResponse(BaseModel):
    message: str
    data: PropertyDetailResponse


class AddHarvestCropRequest(BaseModel):
    """Attach a crop to a harvest of the property, creating either one on the fly.

    Give ``harvest_id`` to use an existing harvest, or the new-harvest fields.
    Give ``crop_id`` to link an existing crop, or ``crop_name`` to create one.
    """

    harvest_id: Optional[UUID] = None
    harvest_name: Optional[NonEmptyStr] = None
    harvest_year: Optional[int] = Field(None, ge=1900, le=2999)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_area_ha: Optional[float] = Field(None, ge=0)

    crop_id: Optional[UUID] = None
    crop_name: Optional[NonEmptyStr] = None
    planted_area_ha: float = Field(..., gt=0)
    planting_date: Optional[date] = None
    harvest_date: Optional[date] = None

    @model_validator(mode="after")
    def check_references(self):
        if not self.harvest_id and not (
            self.harvest_name and self.harvest_year and self.start_date and self.end_date
        ):
            raise ValueError(
                "Either harvest_id or harvest_name, harvest_year, start_date and end_date must be provided"
            )
        if not self.crop_id and not self.crop_name:
            raise ValueError("Either crop_id or crop_name must be provided")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("Harvest end date cannot be before its start date")
        return self


class HarvestCropCreate(BaseModel):
    """A new crop planted in an existing harvest of the property"""

    crop_name: NonEmptyStr
    planted_area_ha: float = Field(..., gt=0)
    planting_date: Optional[date] = None
    harvest_date: Optional[date] = None
