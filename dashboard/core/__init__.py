"""
Core Module
Zentrale Konfiguration und Settings
"""

from .config import DEFAULT_DATA_SOURCES, Settings

__all__ = ["Settings", "DEFAULT_DATA_SOURCES"]
