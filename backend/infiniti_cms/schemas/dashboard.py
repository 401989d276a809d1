"""
Dashboard aggregate schemas.
"""

from pydantic import BaseModel
from typing import List
from uuid import UUID


class DashboardStats(BaseModel):
    """Headline figures for the dashboard."""
    total_clients: int
    active_agreements: int
    monthly_revenue: int
    outstanding: int
    forecasted_revenue: int
    at_risk_clients: int


class RevenueTrendPoint(BaseModel):
    """Paid revenue for one calendar month."""
    month: str
    revenue: int


class DistributionSlice(BaseModel):
    """Client count for one industry."""
    name: str
    value: int


class UpcomingRenewal(BaseModel):
    """Agreement ending within the renewal window."""
    id: UUID
    client_name: str
    agreement_name: str
    days_left: int
    value: str


class RevenueTrendResponse(BaseModel):
    items: List[RevenueTrendPoint]


class ClientDistributionResponse(BaseModel):
    items: List[DistributionSlice]


class UpcomingRenewalResponse(BaseModel):
    items: List[UpcomingRenewal]
