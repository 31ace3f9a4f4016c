# freshora/services/catalog_service.py
from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from freshora.data.models.service import ServiceModel
from freshora.data.models.service_item import ServiceItemModel
from freshora.domain.errors import ConflictError, NotFoundError
from freshora.repos.catalog_repo import CatalogRepo
from freshora.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_UNIT = "Per Item"
DEFAULT_DURATION = "24-48 hours"


def item_to_dict(item: ServiceItemModel) -> Dict[str, Any]:
    return {
        "id": item.id,
        "service_id": item.service_id,
        "category": item.category,
        "name": item.name,
        "price": item.price,
        "unit": item.unit or DEFAULT_UNIT,
        "description": item.description,
        "image": item.image,
    }


def service_to_dict(service: ServiceModel) -> Dict[str, Any]:
    grouped: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
    for item in service.items:
        grouped[item.category].append(
            {
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "description": item.description or "",
                "unit": item.unit or DEFAULT_UNIT,
            }
        )

    return {
        "id": service.id,
        "slug": service.slug,
        "title": service.title,
        "description": service.description,
        "full_description": service.full_description,
        "rating": service.rating,
        "reviews": service.reviews,
        "duration": service.duration,
        "image": service.image,
        "items": dict(grouped),
        "created_at": service.created_at,
        "updated_at": service.updated_at,
    }


class CatalogService:
    """Services and their priceable items. Read by the cart and order services."""

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)

    def list_services(self) -> List[Dict[str, Any]]:
        return [service_to_dict(s) for s in self.repo.list_services()]

    def get_service(self, slug: str) -> Dict[str, Any]:
        service = self.repo.get_service_by_slug(slug)
        if not service:
            raise NotFoundError("Service not found")
        return service_to_dict(service)

    def create_service(
        self,
        slug: str,
        title: str,
        description: str,
        full_description: str | None = None,
        rating: int | None = None,
        reviews: int | None = None,
        duration: str | None = None,
        image: str | None = None,
    ) -> Dict[str, Any]:
        if self.repo.get_service_by_slug(slug):
            raise ConflictError(f"Service with slug '{slug}' already exists")

        service = ServiceModel(
            slug=slug,
            title=title,
            description=description,
            full_description=full_description or description,
            rating=rating if rating is not None else 5,
            reviews=reviews if reviews is not None else 0,
            duration=duration or DEFAULT_DURATION,
            image=image,
        )

        try:
            created = self.repo.create_service(service)
        except IntegrityError:
            raise ConflictError(f"Service with slug '{slug}' already exists")

        logger.info(f"Created service {created.id} ({slug})")
        return service_to_dict(created)

    def add_item_to_service(self, slug: str, **fields) -> Dict[str, Any]:
        service = self.repo.get_service_by_slug(slug)
        if not service:
            raise NotFoundError("Service not found")

        [item] = self.repo.add_items([self._new_item(service.id, fields)])
        logger.info(f"Added item {item.id} to service '{slug}'")
        return item_to_dict(item)

    def list_items(self, service_id: int | None = None) -> List[Dict[str, Any]]:
        items = self.repo.list_items(service_id)
        if not items:
            raise NotFoundError("No items found")
        return [item_to_dict(i) for i in items]

    def create_item(self, service_id: int, **fields) -> Dict[str, Any]:
        if not self.repo.get_service(service_id):
            raise NotFoundError("Service not found")

        [item] = self.repo.add_items([self._new_item(service_id, fields)])
        return item_to_dict(item)

    def bulk_create_items(self, service_id: int, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not self.repo.get_service(service_id):
            raise NotFoundError("Service not found")

        created = self.repo.add_items([self._new_item(service_id, f) for f in items])
        logger.info(f"Added {len(created)} items to service {service_id}")
        return [item_to_dict(i) for i in created]

    @staticmethod
    def _new_item(service_id: int, fields: Dict[str, Any]) -> ServiceItemModel:
        return ServiceItemModel(
            service_id=service_id,
            category=fields["category"],
            name=fields["name"],
            price=Decimal(str(fields["price"])),
            unit=fields.get("unit") or DEFAULT_UNIT,
            description=fields.get("description"),
            image=fields.get("image"),
        )
