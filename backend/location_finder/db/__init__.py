from location_finder.db.base import Base
from location_finder.db.session import get_db, engine, SessionLocal
from location_finder.db.tables import ALL_TABLE_NAMES, USER_TABLE_NAMES

__all__ = ["get_db", "engine", "SessionLocal", "Base", "ALL_TABLE_NAMES", "USER_TABLE_NAMES"]
