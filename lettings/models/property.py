"""Property model - a rentable unit owned by a user."""
import uuid
from sqlalchemy import Column, String, Text, Numeric, DateTime, Index
from sqlalchemy.orm import relationship
from lettings.database import Base


class Property(Base):
    """Property listing."""

    __tablename__ = 'property'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(255), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String(500), nullable=False)
    monthly_rent = Column(Numeric(12, 2), nullable=False)
    # Set by property_service, not by the database
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    tenant = relationship('Tenant', back_populates='property', uselist=False)

    __table_args__ = (
        Index('ix_property_owner_id', 'owner_id'),
    )

    def __repr__(self):
        return f"<Property(id='{self.id}', title='{self.title}', owner_id='{self.owner_id}')>"
