"""Property blueprint - create and read property listings (JSON)."""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from flask import Blueprint, request, jsonify, g

from lettings.database import get_session
from lettings.exceptions import BusinessLogicError
from lettings.middleware import require_identity
from lettings.services.property_service import (
    create_property, get_property_or_404, list_owner_properties, property_to_dict
)

logger = logging.getLogger(__name__)

properties_bp = Blueprint('properties', __name__, url_prefix='/property')


def _get_property_data_from_json() -> Dict[str, Any]:
    """Extract and sanitize property data from the JSON body."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BusinessLogicError('A JSON object body is required')

    data = {
        'title': str(body.get('title') or '').strip(),
        'description': str(body.get('description') or '').strip() or None,
        'address': str(body.get('address') or '').strip(),
    }
    if not data['title']:
        raise BusinessLogicError('title is required')
    if not data['address']:
        raise BusinessLogicError('address is required')

    raw_rent = body.get('monthlyRent', body.get('monthly_rent'))
    try:
        monthly_rent = Decimal(str(raw_rent))
    except (InvalidOperation, ValueError):
        raise BusinessLogicError('monthlyRent must be a decimal amount')
    if not monthly_rent.is_finite() or monthly_rent <= 0:
        raise BusinessLogicError('monthlyRent must be greater than 0')
    data['monthly_rent'] = monthly_rent
    return data


@properties_bp.route('/createProperty', methods=['POST'])
@require_identity
def create():
    """Create a property owned by the caller. Returns the new id."""
    data = _get_property_data_from_json()
    property_id = create_property(get_session(), data, g.user_id)
    return jsonify({'id': property_id}), 201


@properties_bp.route('/getProperty/<property_id>', methods=['GET'])
def get_one(property_id: str):
    property_ = get_property_or_404(get_session(), property_id)
    return jsonify(property_to_dict(property_)), 200


@properties_bp.route('/getAllOwnerProperties', methods=['GET'])
@require_identity
def list_for_owner():
    """List the caller's properties."""
    properties = list_owner_properties(get_session(), g.user_id)
    return jsonify([property_to_dict(p) for p in properties]), 200
