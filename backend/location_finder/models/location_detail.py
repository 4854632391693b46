"""
Location detail: identity record for a place (query text + provider metadata).

No uniqueness constraint. address_key is the canonical matching key (lowercase,
collapsed whitespace) used by both the resolver and the favorites recorder.
user_id is NULL for anonymous lookups.
"""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from location_finder.core.constants import ADDRESS_MAX_LENGTH
from location_finder.db.base import Base


class LocationDetail(Base):
    __tablename__ = "location_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column(Text, nullable=False)
    address_key = Column(String(ADDRESS_MAX_LENGTH), nullable=False, index=True)
    formatted_address = Column(Text, nullable=True)
    display_name = Column(Text, nullable=True)
    place_type = Column(String(64), nullable=True)
    country = Column(String(128), nullable=True)
    state = Column(String(128), nullable=True)
    city = Column(String(128), nullable=True)
    postal_code = Column(String(32), nullable=True)
    user_id = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    coordinates = relationship(
        "LocationCoordinate",
        back_populates="location_detail",
        order_by="LocationCoordinate.id",
        cascade="all, delete-orphan",
    )
