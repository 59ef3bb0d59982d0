"""Tenant model - the person occupying a property."""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from lettings.database import Base


class Tenant(Base):
    """Tenant assigned to exactly one property."""

    __tablename__ = 'tenant'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    property_id = Column(String(36), ForeignKey('property.id'), nullable=False)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    property = relationship('Property', back_populates='tenant')

    # One active tenant per property
    __table_args__ = (
        UniqueConstraint('property_id', name='uq_tenant_property_id'),
    )

    def __repr__(self):
        return f"<Tenant(id='{self.id}', name='{self.name}', property_id='{self.property_id}')>"
