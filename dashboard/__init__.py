"""
Data Summary Dashboard
Einmalige Datensammlung aus externen Quellen mit Read-Only API
"""

__version__ = "1.0.0"
__author__ = "Dashboard Team"

# NOTE:
# Avoid importing heavy modules (like configuration) at package import time to
# keep "import dashboard" lightweight and side-effect free for unit tests.

__all__ = []
