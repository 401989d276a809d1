"""
Financial report endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.db.session import get_db
from infiniti_cms.controllers.dashboard_controller import DashboardController
from infiniti_cms.schemas.report import OutstandingReport, RevenueReport

router = APIRouter()


@router.get("/outstanding", response_model=OutstandingReport)
async def get_outstanding_report(
    currency: str = Query(None),
    period: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> OutstandingReport:
    """Pending and overdue invoices with aging."""
    controller = DashboardController(db)
    try:
        return await controller.get_outstanding_report(currency=currency, period=period)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/revenue", response_model=RevenueReport)
async def get_revenue_report(
    currency: str = Query(None),
    period: str = Query(None),
    db: AsyncSession = Depends(get_db),
) -> RevenueReport:
    """Paid revenue, service mix and top clients."""
    controller = DashboardController(db)
    try:
        return await controller.get_revenue_report(currency=currency, period=period)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
