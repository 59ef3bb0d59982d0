"""Tenant service - assigns tenants to properties (one active tenant per property)."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lettings.exceptions import (
    BusinessLogicError, InternalError, LettingsError, PropertyNotFoundError, TenantConflictError
)
from lettings.models import Property, Tenant
from lettings.services.event_service import EventPublisher, TENANT_CREATED_TOPIC

logger = logging.getLogger(__name__)


def create_tenant(
    session,
    data: Dict[str, Any],
    publisher: Optional[EventPublisher] = None
) -> str:
    """
    Create a tenant and attach it to its property.

    The property row is locked (SELECT ... FOR UPDATE) for the whole
    check-and-insert, and tenant.property_id is unique, so concurrent
    assignments to the same property end with exactly one tenant and
    TenantConflictError for every other caller.

    Args:
        session: SQLAlchemy session
        data: dict with property_id, name and optional email, phone
        publisher: receives 'property.tenant.created' after commit

    Returns:
        id of the new tenant

    Raises:
        PropertyNotFoundError: property_id does not exist
        TenantConflictError: property already has an active tenant
        BusinessLogicError: tenant name missing
        InternalError: storage failure
    """
    property_id = data['property_id']

    try:
        # Step 1: Lock property row
        property_ = (
            session.query(Property)
            .filter(Property.id == property_id)
            .with_for_update()
            .first()
        )

        if property_ is None:
            raise PropertyNotFoundError(property_id)

        # Step 2: One active tenant per property
        if property_.tenant is not None:
            raise TenantConflictError(property_id)

        name = (data.get('name') or '').strip()
        if not name:
            raise BusinessLogicError('name is required')

        # Step 3: Create tenant linked to the property
        tenant = Tenant(
            property_id=property_.id,
            name=name,
            email=data.get('email'),
            phone=data.get('phone'),
            created_at=datetime.now(timezone.utc),
        )
        session.add(tenant)

        # Step 4: flush + commit; the unique constraint catches a concurrent assignment
        session.flush()
        tenant_id = tenant.id
        session.commit()

    except LettingsError:
        session.rollback()
        raise
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"[TENANT] Concurrent assignment rejected for property {property_id}: {e.orig}")
        raise TenantConflictError(property_id)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"[TENANT] Storage error creating tenant for property {property_id}: {e}")
        raise InternalError()
    except Exception:
        session.rollback()
        raise

    logger.info(f"[TENANT] Created tenant {tenant_id} for property {property_id}")

    # Step 5: Notify after commit; never affects the stored tenant
    if publisher is not None:
        _notify_tenant_created(publisher, data)

    return tenant_id


def _notify_tenant_created(publisher: EventPublisher, data: Dict[str, Any]) -> None:
    try:
        publisher.send(TENANT_CREATED_TOPIC, data)
    except Exception as e:
        logger.error(f"[TENANT] Failed to emit {TENANT_CREATED_TOPIC} for property {data.get('property_id')}: {e}")

