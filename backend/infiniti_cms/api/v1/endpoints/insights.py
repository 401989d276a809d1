"""
Insight endpoints: forecast, risk and health heuristics.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.dashboard_controller import DashboardController
from infiniti_cms.schemas.insight import InsightsResponse

router = APIRouter()


@router.get("", response_model=InsightsResponse)
async def get_insights(
    db: AsyncSession = Depends(get_db),
) -> InsightsResponse:
    """Deterministic forecast, at-risk, health and profitability figures."""
    controller = DashboardController(db)
    return await controller.get_insights()
