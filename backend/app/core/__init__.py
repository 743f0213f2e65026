# CMS Core Module
from .config import get_settings, settings
from .database import Base, Database, get_database, get_db
from .logging import setup_logging

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "Base",
    "Database",
    "get_database",
    "get_db",
]
