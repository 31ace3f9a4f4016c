# freshora/repos/order_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from freshora.data.models.order import OrderModel
from freshora.data.models.order_item import OrderItemModel


def _with_items():
    return selectinload(OrderModel.items).options(
        selectinload(OrderItemModel.service),
        selectinload(OrderItemModel.service_item),
    )


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        # order and its items are flushed and committed together
        try:
            self.db.add(order)
            self.db.flush()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).options(_with_items()).where(OrderModel.id == order_id)
        ).scalar_one_or_none()

    def get_order_by_public_id(self, public_id: str) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).options(_with_items()).where(OrderModel.order_id == public_id)
        ).scalar_one_or_none()

    def list_orders(
        self,
        status: str | None = None,
        customer_email: str | None = None,
        limit: int = 50,
    ) -> List[OrderModel]:
        stmt = select(OrderModel).options(_with_items())
        if status:
            stmt = stmt.where(OrderModel.status == status)
        if customer_email:
            stmt = stmt.where(func.lower(OrderModel.customer_email) == customer_email.lower())
        stmt = stmt.order_by(OrderModel.created_at.desc(), OrderModel.id.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def save(self, order: OrderModel) -> OrderModel:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order
