from typing import List, Optional

from pydantic import BaseModel, Field


class DashboardFilters(BaseModel):
    state: Optional[str] = None
    city: Optional[str] = None
    year: Optional[int] = Field(None, ge=0, description="Harvest year, ignored unless positive")
    # Accepted for forward compatibility, the stats are not paginated
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


class StateCount(BaseModel):
    state: str
    count: int


class CityCount(BaseModel):
    city: str
    count: int


class CropArea(BaseModel):
    name: str
    area: int


class LandUse(BaseModel):
    name: str
    value: int


class PropertyArea(BaseModel):
    name: str
    totalArea: int


class AdminStats(BaseModel):
    totalFarmers: int
    totalProperties: int
    totalHectares: int
    totalCrops: int
    propertiesByState: List[StateCount]
    topCities: List[CityCount]
    cropDistribution: List[CropArea]
    landUseDistribution: List[LandUse]


class FarmerStats(BaseModel):
    totalProperties: int
    totalHectares: int
    activeHarvests: int
    totalCrops: int
    myProperties: List[PropertyArea]
    myCrops: List[CropArea]
    myLandUse: List[LandUse]


class AdminStatsResponse(BaseModel):
    data: AdminStats


class FarmerStatsResponse(BaseModel):
    data: FarmerStats
