"""Coordinates for a location detail. One-to-many in the schema; the app reads the first row."""
from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from location_finder.db.base import Base


class LocationCoordinate(Base):
    __tablename__ = "location_coordinates"
    __table_args__ = (
        CheckConstraint("latitude >= -90 AND latitude <= 90", name="ck_location_coordinates_latitude"),
        CheckConstraint("longitude >= -180 AND longitude <= 180", name="ck_location_coordinates_longitude"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    location_detail_id = Column(
        Integer, ForeignKey("location_details.id", ondelete="CASCADE"), nullable=True, index=True
    )
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    accuracy = Column(Float, nullable=True)  # provider relevance score (Nominatim "importance")
    elevation = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    location_detail = relationship("LocationDetail", back_populates="coordinates")
