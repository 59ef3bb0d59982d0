"""Property service - creation and lookup of property listings."""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lettings.exceptions import ConflictError, InternalError, NotFoundError
from lettings.models import Property

logger = logging.getLogger(__name__)


def create_property(session, data: Dict[str, Any], owner_id: str) -> str:
    """
    Create and persist a new property for an owner.

    Args:
        session: SQLAlchemy session
        data: dict with title, description, address, monthly_rent
        owner_id: identifier of the owner creating the property

    Returns:
        id of the new property

    Raises:
        ConflictError: the insert violated a constraint
        InternalError: any other storage failure
    """
    now = datetime.now(timezone.utc)
    property_ = Property(
        owner_id=owner_id,
        title=data['title'],
        description=data.get('description'),
        address=data['address'],
        monthly_rent=Decimal(str(data['monthly_rent'])),
        created_at=now,
        updated_at=now,
    )

    try:
        session.add(property_)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"[PROPERTY] Constraint violation creating property for owner {owner_id}: {e.orig}")
        raise ConflictError("Property violates a storage constraint")
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"[PROPERTY] Storage error creating property for owner {owner_id}: {e}")
        raise InternalError()

    logger.info(f"[PROPERTY] Created property {property_.id} for owner {owner_id}")
    return property_.id


def get_property(session, property_id: str) -> Optional[Property]:
    """Return the property with this id, or None."""
    return session.query(Property).filter(Property.id == property_id).first()


def get_property_or_404(session, property_id: str) -> Property:
    property_ = get_property(session, property_id)
    if property_ is None:
        raise NotFoundError(f"Property with id {property_id} does not exist.")
    return property_


def list_owner_properties(session, owner_id: str) -> List[Property]:
    """All properties of an owner, oldest first."""
    return (
        session.query(Property)
        .filter(Property.owner_id == owner_id)
        .order_by(Property.created_at, Property.id)
        .all()
    )


def property_to_dict(property_: Property) -> Dict[str, Any]:
    """Serialize a property for JSON responses."""
    return {
        'id': property_.id,
        'owner_id': property_.owner_id,
        'title': property_.title,
        'description': property_.description,
        'address': property_.address,
        'monthly_rent': str(property_.monthly_rent),
        'created_at': property_.created_at.isoformat() if property_.created_at else None,
        'updated_at': property_.updated_at.isoformat() if property_.updated_at else None,
        'tenant_id': property_.tenant.id if property_.tenant else None,
    }
