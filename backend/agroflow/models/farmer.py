from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from agroflow.core.database import Base
from .common import CommonColumns

ROLE_FARMER = "farmer"
ROLE_ADMIN = "admin"


class Farmer(CommonColumns, Base):
    __tablename__ = "farmers"

    cpf = Column(String(11), unique=True, nullable=True)
    cnpj = Column(String(14), unique=True, nullable=True)
    producer_name = Column(String(150), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(16), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_FARMER, server_default=ROLE_FARMER)

    properties = relationship("Property", back_populates="farmer", passive_deletes=True)
