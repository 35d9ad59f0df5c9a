from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from agroflow.core.database import Base
from .common import CommonColumns


class Harvest(CommonColumns, Base):
    __tablename__ = "harvests"

    property_id = Column(Uuid, ForeignKey("properties.id"), nullable=True, index=True)
    harvest_year = Column(Integer, nullable=False, index=True)
    harvest_name = Column(String(150), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_area_ha = Column(Float, nullable=True)

    property = relationship("Property", back_populates="harvests")
    property_crop_harvests = relationship("PropertyCropHarvest", back_populates="harvest", passive_deletes=True)
