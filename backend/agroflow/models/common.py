import uuid

from sqlalchemy import Boolean, Column, DateTime, Uuid
from sqlalchemy.sql import expression, func


class CommonColumns:
    """Columns shared by every table: uuid key, timestamps and the active flag"""

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=expression.true())
