# freshora/data/models/service_item.py
import uuid

from sqlalchemy import Column, Integer, ForeignKey, String, Text, Numeric, CheckConstraint
from sqlalchemy.orm import relationship

from freshora.data.database import Base


def new_item_id() -> str:
    return uuid.uuid4().hex


class ServiceItemModel(Base):
    __tablename__ = "service_items"

    id = Column(String, primary_key=True, default=new_item_id)
    service_id = Column(Integer, ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True)

    category = Column(String, nullable=False)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    unit = Column(String, nullable=False, default="Per Item")
    description = Column(Text, nullable=True)
    image = Column(String, nullable=True)

    service = relationship("ServiceModel", back_populates="items")

    __table_args__ = (CheckConstraint("price >= 0", name="ck_service_item_price"),)
