"""
Database Schema
SQLAlchemy Models für das Dashboard
"""

from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class DataSummary(Base):
    __tablename__ = "data_summaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source = Column(Text, nullable=False)
    # assigned by DatabaseManager.insert_summary while holding the insert lock
    created_at = Column(DateTime(timezone=True), nullable=False)
