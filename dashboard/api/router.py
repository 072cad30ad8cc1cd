"""
Aggregated API router.
"""

from fastapi import APIRouter

from dashboard.api.endpoints import data


api_router = APIRouter()

# Register endpoint routers here to keep create_fastapi_app clean
api_router.include_router(data.router, tags=["data"])
