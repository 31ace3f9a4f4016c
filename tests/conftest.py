from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from freshora.api.routers.orders import get_notifier
from freshora.data.database import Database
from freshora.data.models import ServiceItemModel, ServiceModel
from freshora.main import create_app


class RecordingNotifier:
    """Stands in for NotificationService and remembers every call."""

    def __init__(self):
        self.confirmations = []
        self.status_updates = []
        self.fail = False
        self.raise_error = False

    def send_order_confirmation(self, summary):
        self.confirmations.append(summary)
        return self._result()

    def send_status_update(self, summary, new_status):
        self.status_updates.append((summary, new_status))
        return self._result()

    def _result(self):
        if self.raise_error:
            raise RuntimeError("smtp down")
        if self.fail:
            return {"success": False, "error": "broker unavailable"}
        return {"success": True, "messageId": "msg-1"}


def seed_test_catalog(session):
    laundry = ServiceModel(
        slug="laundry-services",
        title="Regular Laundry Services",
        description="Everyday washing",
    )
    laundry.items = [
        ServiceItemModel(id="svc-1", category="men", name="Shirt", price=Decimal("5.00")),
        ServiceItemModel(id="suit-10", category="men", name="Suit", price=Decimal("10.00")),
        ServiceItemModel(id="abc123", category="women", name="Dress", price=Decimal("8.00")),
    ]
    dry = ServiceModel(
        slug="dry-cleaning-services",
        title="Dry Cleaning Services",
        description="Delicate garments",
    )
    dry.items = [
        ServiceItemModel(id="gown-35", category="women", name="Evening Gown", price=Decimal("35.00")),
    ]
    session.add_all([laundry, dry])
    session.commit()


@pytest.fixture
def database():
    """In-memory SQLite shared across connections via StaticPool."""
    db = Database("sqlite:///:memory:")
    db.create_all()
    with db.session_scope() as session:
        seed_test_catalog(session)
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session_factory()
    yield session
    session.close()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(database, notifier):
    app = create_app(database)
    app.dependency_overrides[get_notifier] = lambda: notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def customer_info():
    return {"name": "Alice Smith", "email": "alice@example.com", "phone": "555-1234"}
