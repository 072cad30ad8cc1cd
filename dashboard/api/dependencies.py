"""
API Dependencies
Dependency Injection für FastAPI
"""

from fastapi import Request

from dashboard.database.manager import DatabaseManager


async def get_db_manager(request: Request) -> DatabaseManager:
    """Dependency für Database Manager (geteilt über App-Lebenszyklus)"""
    return request.app.state.db
