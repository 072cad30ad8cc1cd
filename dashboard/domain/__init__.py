"""
Domain Module
Datenmodelle und Transferobjekte
"""

from .contracts import FetchResult
from .models import SummaryRecord

__all__ = ["FetchResult", "SummaryRecord"]
