from fastapi import APIRouter, Depends

from app.core.exceptions import ServiceError, to_http_exception
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import DashboardSummary
from . import service

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Entity counts, student distributions by status and career, top courses by enrollment and the latest courses.",
)
async def get_dashboard_summary(client: DataServiceClient = Depends(get_data_service)) -> DashboardSummary:
    try:
        return await service.get_summary(client)
    except ServiceError as e:
        raise to_http_exception(e)
