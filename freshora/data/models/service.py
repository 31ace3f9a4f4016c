# freshora/data/models/service.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from freshora.data.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class ServiceModel(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    slug = Column(String, nullable=False, unique=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    full_description = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True, default=5)
    reviews = Column(Integer, nullable=True, default=0)
    duration = Column(String, nullable=True)
    image = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship(
        "ServiceItemModel",
        back_populates="service",
        cascade="all, delete-orphan",
        order_by="ServiceItemModel.name",
    )
