"""
API Module
FastAPI Anwendung, Endpoints und Models
"""

from .dependencies import get_db_manager
from .main import create_fastapi_app
from .models import ErrorResponse, HealthResponse

__all__ = [
    "create_fastapi_app",
    "ErrorResponse",
    "HealthResponse",
    "get_db_manager",
]
