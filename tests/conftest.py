import os
import tempfile
import uuid
from decimal import Decimal

import pytest

# Tests run against a throwaway SQLite file unless TEST_DATABASE_URL is given
_db_dir = tempfile.mkdtemp(prefix='lettings-tests-')
os.environ['DATABASE_URL'] = os.getenv(
    'TEST_DATABASE_URL', f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
)
os.environ['DB_CREATE_ALL'] = 'true'
os.environ['EVENTS_ENABLED'] = 'false'

from lettings import create_app
from lettings.database import get_session
from lettings.models import Property, Tenant
from lettings.services.event_service import EventPublisher
from lettings.services.property_service import create_property


class RecordingPublisher(EventPublisher):
    """Keeps every sent event in memory."""

    def __init__(self):
        self.sent = []

    def send(self, topic, payload):
        self.sent.append((topic, dict(payload)))


class FailingPublisher(EventPublisher):
    """Raises on every send."""

    def send(self, topic, payload):
        raise RuntimeError('broker unavailable')


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.Config')
    app.config['TESTING'] = True
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def session(app):
    """Database session; tables are emptied after each test."""
    session = get_session()
    yield session
    session = get_session()
    session.rollback()
    session.query(Tenant).delete()
    session.query(Property).delete()
    session.commit()
    session.remove()


@pytest.fixture(scope='function')
def publisher():
    return RecordingPublisher()


@pytest.fixture(scope='function')
def failing_publisher():
    return FailingPublisher()


@pytest.fixture(scope='function')
def owner_id():
    return f'owner-{uuid.uuid4().hex[:8]}'


@pytest.fixture(scope='function')
def owner_property(session, owner_id):
    """Create a property with no tenant; returns its id."""
    return create_property(session, {
        'title': 'Flat A',
        'description': 'Two bedrooms',
        'address': '1 Main St',
        'monthly_rent': Decimal('500.00'),
    }, owner_id)
