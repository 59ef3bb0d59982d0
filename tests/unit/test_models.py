"""
Unit tests for SQLAlchemy models.
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy.exc import IntegrityError

from lettings.models import Property, Tenant


def _property(owner_id='owner-1'):
    now = datetime.now(timezone.utc)
    return Property(
        owner_id=owner_id,
        title='Flat B',
        address='2 Side St',
        monthly_rent=Decimal('750.00'),
        created_at=now,
        updated_at=now,
    )


class TestPropertyModel:
    """Tests for Property model."""

    def test_create_property_generates_id(self, session):
        property_ = _property()
        session.add(property_)
        session.commit()

        assert property_.id is not None
        assert len(property_.id) == 36
        assert property_.tenant is None

    def test_ids_are_unique(self, session):
        first, second = _property(), _property()
        session.add_all([first, second])
        session.commit()

        assert first.id != second.id


class TestTenantModel:
    """Tests for Tenant model."""

    def test_tenant_links_property(self, session):
        property_ = _property()
        session.add(property_)
        session.flush()

        tenant = Tenant(property_id=property_.id, name='Alice')
        session.add(tenant)
        session.commit()

        session.refresh(property_)
        assert property_.tenant.id == tenant.id
        assert tenant.property.id == property_.id

    def test_second_tenant_for_property_violates_unique_constraint(self, session):
        """The store rejects a second tenant row for the same property."""
        property_ = _property()
        session.add(property_)
        session.commit()

        session.add(Tenant(property_id=property_.id, name='Alice'))
        session.commit()

        session.add(Tenant(property_id=property_.id, name='Bob'))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

        assert session.query(Tenant).filter_by(property_id=property_.id).count() == 1
