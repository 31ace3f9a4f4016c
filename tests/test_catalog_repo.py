from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from freshora.data.models import ServiceItemModel, ServiceModel
from freshora.repos.catalog_repo import CatalogRepo


def test_failed_bulk_insert_rolls_back_and_session_stays_usable(db_session):
    repo = CatalogRepo(db_session)
    service = repo.get_service_by_slug("dry-cleaning-services")
    before = len(repo.list_items(service.id))

    good = ServiceItemModel(service_id=service.id, category="men", name="Tie", price=Decimal("5.00"))
    bad = ServiceItemModel(service_id=service.id, category="men", name="Refund", price=Decimal("-1.00"))

    with pytest.raises(IntegrityError):
        repo.add_items([good, bad])

    assert len(repo.list_items(service.id)) == before


def test_failed_service_insert_rolls_back_and_session_stays_usable(db_session):
    repo = CatalogRepo(db_session)

    with pytest.raises(IntegrityError):
        repo.create_service(ServiceModel(slug="laundry-services", title="Copy", description="Duplicate slug"))

    assert repo.get_service_by_slug("laundry-services").title == "Regular Laundry Services"
