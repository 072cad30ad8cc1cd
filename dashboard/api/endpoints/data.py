"""
Data API Endpoints
Read-only Zugriff auf alle gespeicherten SummaryRecords
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dashboard.api.dependencies import get_db_manager
from dashboard.api.models import ErrorResponse
from dashboard.common.logging_utils import get_logger
from dashboard.database.manager import DatabaseManager, StoreError
from dashboard.domain.models import SummaryRecord

router = APIRouter()


# Plain def: FastAPI runs it on its worker thread pool, one request per thread
@router.get(
    "/data",
    response_model=list[SummaryRecord],
    responses={500: {"model": ErrorResponse}},
)
def get_data(db_manager: DatabaseManager = Depends(get_db_manager)):
    """All summary records currently in the store, ordered by id"""
    try:
        return db_manager.list_summaries()
    except StoreError as e:
        get_logger(__name__).error(f"Failed to read summaries: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
