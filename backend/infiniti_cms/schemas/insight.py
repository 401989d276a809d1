"""
Insight schemas. Every figure is produced by a fixed heuristic.
"""

from pydantic import BaseModel
from typing import List
from uuid import UUID


class RevenueForecast(BaseModel):
    amount: int
    confidence: int


class AtRiskSummary(BaseModel):
    count: int
    total_value: int


class ClientHealthScore(BaseModel):
    id: UUID
    name: str
    industry: str
    score: int
    reason: str


class ProfitabilityEntry(BaseModel):
    id: UUID
    name: str
    revenue: int
    margin_percent: int


class Recommendation(BaseModel):
    priority: str
    title: str
    description: str
    potential_impact: int


class InsightsResponse(BaseModel):
    """Dashboard insight panel."""
    revenue_forecast: RevenueForecast
    at_risk_clients: AtRiskSummary
    churn_probability: int
    client_health_scores: List[ClientHealthScore]
    profitability_analysis: List[ProfitabilityEntry]
    recommendations: List[Recommendation]
