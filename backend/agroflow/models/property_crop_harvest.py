from sqlalchemy import Column, Date, Float, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from agroflow.core.database import Base
from .common import CommonColumns


class PropertyCropHarvest(CommonColumns, Base):
    """How much area of a crop was planted in a harvest on a property"""

    __tablename__ = "property_crop_harvests"

    property_id = Column(Uuid, ForeignKey("properties.id"), nullable=False, index=True)
    harvest_id = Column(Uuid, ForeignKey("harvests.id"), nullable=False, index=True)
    crop_id = Column(Uuid, ForeignKey("crops.id"), nullable=False, index=True)
    planted_area_ha = Column(Float, nullable=False)
    planting_date = Column(Date, nullable=False)
    harvest_date = Column(Date, nullable=False)

    property = relationship("Property", back_populates="property_crop_harvests")
    harvest = relationship("Harvest", back_populates="property_crop_harvests")
    crop = relationship("Crop", back_populates="property_crop_harvests")
