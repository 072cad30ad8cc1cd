"""
API Models
Pydantic Models für API Responses
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response produced by the API itself"""

    error: str


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    timestamp: datetime
    database: Optional[dict[str, Any]] = None
