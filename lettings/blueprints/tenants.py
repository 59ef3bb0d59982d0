"""Tenant blueprint - assign tenants to properties (JSON)."""
import logging
from typing import Any, Dict

from flask import Blueprint, request, jsonify

from lettings.database import get_session
from lettings.exceptions import BusinessLogicError, NotFoundError
from lettings.services.event_service import get_publisher
from lettings.services.tenant_service import create_tenant

logger = logging.getLogger(__name__)

tenants_bp = Blueprint('tenants', __name__, url_prefix='/tenant')


def _get_tenant_data_from_json() -> Dict[str, Any]:
    """Extract and sanitize tenant data from the JSON body."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BusinessLogicError('A JSON object body is required')

    data = {
        'property_id': str(body.get('propertyId') or body.get('property_id') or '').strip(),
        'name': str(body.get('name') or '').strip(),
        'email': str(body.get('email') or '').strip() or None,
        'phone': str(body.get('phone') or '').strip() or None,
    }
    if not data['property_id']:
        raise BusinessLogicError('propertyId is required')
    return data


@tenants_bp.route('/createTenant', methods=['POST'])
def create():
    """
    Create a tenant for a property.

    Returns:
        201: {"id": <tenant id>}
        400: propertyId missing, or name missing for an existing property
        409: property does not exist or already has an active tenant
    """
    data = _get_tenant_data_from_json()
    try:
        tenant_id = create_tenant(get_session(), data, publisher=get_publisher())
    except NotFoundError as e:
        logger.info(f"[TENANT] Rejected: {e.message}")
        return jsonify(e.to_dict()), 409
    return jsonify({'id': tenant_id}), 201
