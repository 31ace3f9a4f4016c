# freshora/data/models/order.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric
from sqlalchemy.orm import relationship

from freshora.data.database import Base
from freshora.data.models.service import utcnow

# lifecycle order matters: tracking derives completed steps from it
ORDER_STATUSES = (
    "pending",
    "confirmed",
    "processing",
    "ready_for_pickup",
    "out_for_delivery",
    "completed",
    "cancelled",
)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    order_id = Column(String, nullable=False, unique=True, index=True)

    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False, index=True)
    customer_phone = Column(String, nullable=False)
    customer_address = Column(Text, nullable=True)

    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String, nullable=False, default="pending", index=True)

    notes = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)
    pickup_date = Column(DateTime(timezone=True), nullable=True)
    delivery_date = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )
