# freshora/repos/catalog_repo.py
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from freshora.data.models.service import ServiceModel
from freshora.data.models.service_item import ServiceItemModel


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_services(self) -> List[ServiceModel]:
        stmt = select(ServiceModel).options(selectinload(ServiceModel.items)).order_by(ServiceModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_service(self, service_id: int) -> ServiceModel | None:
        return self.db.get(ServiceModel, service_id)

    def get_service_by_slug(self, slug: str) -> ServiceModel | None:
        return self.db.execute(
            select(ServiceModel).where(ServiceModel.slug == slug)
        ).scalar_one_or_none()

    def create_service(self, service: ServiceModel) -> ServiceModel:
        try:
            self.db.add(service)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(service)
        return service

    def get_item(self, item_id: str) -> ServiceItemModel | None:
        return self.db.get(ServiceItemModel, item_id)

    def get_items_by_ids(self, item_ids: Iterable[str]) -> List[ServiceItemModel]:
        ids = list(set(item_ids))
        if not ids:
            return []
        return list(
            self.db.execute(
                select(ServiceItemModel).where(ServiceItemModel.id.in_(ids))
            ).scalars().all()
        )

    def list_items(self, service_id: int | None = None) -> List[ServiceItemModel]:
        stmt = select(ServiceItemModel)
        if service_id is not None:
            stmt = stmt.where(ServiceItemModel.service_id == service_id)
        stmt = stmt.order_by(ServiceItemModel.service_id, ServiceItemModel.category, ServiceItemModel.name)
        return list(self.db.execute(stmt).scalars().all())

    def add_items(self, items: List[ServiceItemModel]) -> List[ServiceItemModel]:
        # one commit, so a bulk insert is all-or-nothing
        try:
            self.db.add_all(items)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        for item in items:
            self.db.refresh(item)
        return items
