# freshora/data/models/cart_item.py
from sqlalchemy import Column, Integer, ForeignKey, String, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from freshora.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False, index=True)
    service_item_id = Column(String, ForeignKey("service_items.id"), nullable=False)

    quantity = Column(Integer, nullable=False)

    cart = relationship("CartModel", back_populates="items")
    service = relationship("ServiceModel")
    service_item = relationship("ServiceItemModel")

    __table_args__ = (
        UniqueConstraint("cart_id", "service_item_id", name="u_cart_service_item"),
        CheckConstraint("quantity > 0", name="ck_cart_item_quantity"),
    )
