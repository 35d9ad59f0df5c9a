from sqlalchemy import Column, Float, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from agroflow.core.database import Base
from .common import CommonColumns


class Property(CommonColumns, Base):
    __tablename__ = "properties"

    farmer_id = Column(Uuid, ForeignKey("farmers.id"), nullable=False, index=True)
    farm_name = Column(String(150), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(2), nullable=False, index=True)
    total_area_ha = Column(Float, nullable=False)
    arable_area_ha = Column(Float, nullable=False)
    vegetable_area_ha = Column(Float, nullable=False)

    farmer = relationship("Farmer", back_populates="properties")
    harvests = relationship("Harvest", back_populates="property", passive_deletes=True)
    property_crop_harvests = relationship("PropertyCropHarvest", back_populates="property", passive_deletes=True)
