"""
Dashboard, report and insight controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.controllers.base_controller import BaseController
from infiniti_cms.services.dashboard_service import DashboardService
from infiniti_cms.services.insight_service import InsightService
from infiniti_cms.services.report_service import ReportService
from infiniti_cms.schemas.dashboard import (
    DashboardStats,
    RevenueTrendResponse,
    ClientDistributionResponse,
    UpcomingRenewalResponse,
)
from infiniti_cms.schemas.insight import InsightsResponse
from infiniti_cms.schemas.report import OutstandingReport, RevenueReport


class DashboardController(BaseController):
    """Controller for read-only aggregate views."""

    def __init__(self, session: AsyncSession):
        self.dashboard_service = DashboardService(session)
        self.report_service = ReportService(session)
        self.insight_service = InsightService(session)

    async def get_stats(self, client_id: Optional[UUID] = None) -> DashboardStats:
        return await self.dashboard_service.get_stats(client_id)

    async def get_revenue_trends(self, client_id: Optional[UUID] = None) -> RevenueTrendResponse:
        return RevenueTrendResponse(items=await self.dashboard_service.get_revenue_trends(client_id))

    async def get_client_distribution(self, client_id: Optional[UUID] = None) -> ClientDistributionResponse:
        return ClientDistributionResponse(items=await self.dashboard_service.get_client_distribution(client_id))

    async def get_upcoming_renewals(self, client_id: Optional[UUID] = None) -> UpcomingRenewalResponse:
        return UpcomingRenewalResponse(items=await self.dashboard_service.get_upcoming_renewals(client_id))

    async def get_outstanding_report(self, currency: Optional[str] = None, period: Optional[str] = None) -> OutstandingReport:
        return await self.report_service.outstanding(currency=currency, period=period)

    async def get_revenue_report(self, currency: Optional[str] = None, period: Optional[str] = None) -> RevenueReport:
        return await self.report_service.revenue(currency=currency, period=period)

    async def get_insights(self) -> InsightsResponse:
        return await self.insight_service.get_insights()
