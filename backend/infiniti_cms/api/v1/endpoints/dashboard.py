"""
Dashboard aggregate endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.dashboard_controller import DashboardController
from infiniti_cms.schemas.dashboard import (
    DashboardStats,
    RevenueTrendResponse,
    ClientDistributionResponse,
    UpcomingRenewalResponse,
)

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    client_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> DashboardStats:
    """Headline counts and revenue, optionally for a single client."""
    controller = DashboardController(db)
    return await controller.get_stats(client_id)


@router.get("/revenue-trends", response_model=RevenueTrendResponse)
async def get_revenue_trends(
    client_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> RevenueTrendResponse:
    """Paid and pending revenue for the last six months."""
    controller = DashboardController(db)
    return await controller.get_revenue_trends(client_id)


@router.get("/client-distribution", response_model=ClientDistributionResponse)
async def get_client_distribution(
    client_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ClientDistributionResponse:
    """Client counts per industry."""
    controller = DashboardController(db)
    return await controller.get_client_distribution(client_id)


@router.get("/upcoming-renewals", response_model=UpcomingRenewalResponse)
async def get_upcoming_renewals(
    client_id: UUID = Query(None),
    db: AsyncSession = Depends(get_db),
) -> UpcomingRenewalResponse:
    """Agreements ending within the renewal window."""
    controller = DashboardController(db)
    return await controller.get_upcoming_renewals(client_id)
