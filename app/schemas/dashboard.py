"""
app/schemas/dashboard.py

Purpose: Dashboard response shapes
"""

from datetime import datetime
from typing import Literal, Optional

from app.models.base import CamelModel
from app.schemas.base import Amount


class DashboardMetrics(CamelModel):
    total_clients: int
    upcoming_dues: int
    outstanding_amount: Amount
    monthly_revenue: Amount


class Activity(CamelModel):
    """One entry of the recent-activity feed."""

    type: Literal["client", "payment", "outstanding"]
    title: str
    subtitle: str
    timestamp: Optional[datetime] = None
    client_id: Optional[int] = None
