"""Models package - exports all SQLAlchemy models."""
from lettings.models.property import Property
from lettings.models.tenant import Tenant

__all__ = ['Property', 'Tenant']
