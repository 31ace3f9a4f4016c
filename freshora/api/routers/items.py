# freshora/api/routers/items.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from freshora.data.database import get_db
from freshora.domain.schemas import BulkItemsCreate, Envelope, ItemCreate, ItemOut
from freshora.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/items", tags=["items"])


def get_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("", response_model=Envelope[List[ItemOut]])
def list_items(
    service_id: Optional[int] = Query(None, alias="serviceId"),
    svc: CatalogService = Depends(get_service),
):
    return Envelope(data=svc.list_items(service_id))


@router.post("", response_model=Envelope[ItemOut], status_code=201)
def create_item(payload: ItemCreate, svc: CatalogService = Depends(get_service)):
    fields = payload.model_dump(exclude={"service_id"})
    item = svc.create_item(payload.service_id, **fields)
    return Envelope(data=item, message="Item added successfully")


@router.put("/bulk", response_model=Envelope[List[ItemOut]], status_code=201)
def bulk_create_items(payload: BulkItemsCreate, svc: CatalogService = Depends(get_service)):
    items = svc.bulk_create_items(payload.service_id, [i.model_dump() for i in payload.items])
    return Envelope(data=items, message=f"{len(items)} items added successfully")
