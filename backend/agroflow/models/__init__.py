"""
AgroFlow models
"""
from .farmer import Farmer, ROLE_ADMIN, ROLE_FARMER
from .property import Property
from .crop import Crop
from .harvest import Harvest
from .property_crop_harvest import PropertyCropHarvest

__all__ = [
    "Farmer",
    "ROLE_ADMIN",
    "ROLE_FARMER",
    "Property",
    "Crop",
    "Harvest",
    "PropertyCropHarvest",
]
