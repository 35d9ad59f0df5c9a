"""
AgroFlow schemas
"""
from .common import CommonResponse, IdData, MessageResponse, MessageWithId, Paginated
from .auth import LoginRequest, LoginResponse, RefreshRequest, UserSummary
from .farmer import FarmerCreate, FarmerPasswordUpdate, FarmerResponse, FarmerUpdate
from .crop import CropCreate, CropCreatedResponse, CropResponse, CropUpdate
from .harvest import HarvestCreate, HarvestCreatedResponse, HarvestResponse, HarvestUpdate
from .property_crop_harvest import (
    PropertyCropHarvestCreate,
    PropertyCropHarvestCreatedResponse,
    PropertyCropHarvestResponse,
    PropertyCropHarvestUpdate,
)
from .property import (
    AddHarvestCropRequest,
    HarvestCropCreate,
    HarvestCropEntry,
    HarvestTree,
    PropertyCreate,
    PropertyCreatedResponse,
    PropertyDetailResponse,
    PropertyResponse,
    PropertyUpdate,
)
from .dashboard import AdminStatsResponse, DashboardFilters, FarmerStatsResponse
