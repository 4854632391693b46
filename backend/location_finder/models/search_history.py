"""Search history: one row per search by a signed-in user. Pruned to the newest N per user."""
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from location_finder.db.base import Base


class SearchHistoryEntry(Base):
    __tablename__ = "search_history"
    __table_args__ = (Index("ix_search_history_user_searched_at", "user_id", "searched_at"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    location_detail_id = Column(
        Integer, ForeignKey("location_details.id", ondelete="SET NULL"), nullable=True, index=True
    )
    search_query = Column(Text, nullable=False)
    searched_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    location_detail = relationship("LocationDetail")
