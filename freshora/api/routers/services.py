# freshora/api/routers/services.py
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from freshora.data.database import get_db
from freshora.domain.schemas import (
    Envelope,
    ItemOut,
    ServiceCreate,
    ServiceItemCreate,
    ServiceOut,
)
from freshora.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/services", tags=["services"])


def get_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("", response_model=Envelope[List[ServiceOut]])
def list_services(svc: CatalogService = Depends(get_service)):
    return Envelope(data=svc.list_services())


@router.post("", response_model=Envelope[ServiceOut], status_code=201)
def create_service(payload: ServiceCreate, svc: CatalogService = Depends(get_service)):
    created = svc.create_service(**payload.model_dump())
    return Envelope(data=created, message="Service created successfully")


@router.get("/{slug}", response_model=Envelope[ServiceOut])
def get_service_by_slug(slug: str = Path(..., min_length=1), svc: CatalogService = Depends(get_service)):
    return Envelope(data=svc.get_service(slug))


@router.post("/{slug}/items", response_model=Envelope[ItemOut], status_code=201)
def add_item_to_service(
    payload: ServiceItemCreate,
    slug: str = Path(..., min_length=1),
    svc: CatalogService = Depends(get_service),
):
    item = svc.add_item_to_service(slug, **payload.model_dump())
    return Envelope(data=item, message=f"Item added successfully to service '{slug}'")
