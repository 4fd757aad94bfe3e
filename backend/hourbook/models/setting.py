from sqlalchemy import Column, DateTime, Numeric, String
from sqlalchemy.sql import func
from hourbook.db import Base


class Setting(Base):
    __tablename__ = "settings"

    # Only "hourly_rate" is used today
    name = Column(String(64), primary_key=True, index=True, nullable=False)

    # Kept as entered; any positive value is accepted
    numeric_value = Column(Numeric(12, 4), nullable=True)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
