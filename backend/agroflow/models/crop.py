from sqlalchemy import Column, Index, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from agroflow.core.database import Base
from .common import CommonColumns


class Crop(CommonColumns, Base):
    __tablename__ = "crops"

    crop_name = Column(String(100), nullable=False)

    property_crop_harvests = relationship("PropertyCropHarvest", back_populates="crop", passive_deletes=True)

    __table_args__ = (
        # "Soja" and "soja" are the same crop
        Index("ix_crops_crop_name_lower", func.lower(crop_name), unique=True),
    )
