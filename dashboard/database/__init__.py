"""
Database Module
SQLAlchemy Schema und Database Manager
"""

from .manager import DatabaseManager, InitError, StoreError
from .schema import Base, DataSummary

__all__ = [
    "DatabaseManager",
    "StoreError",
    "InitError",
    "Base",
    "DataSummary",
]
