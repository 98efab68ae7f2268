"""
app/api/dashboard.py

Purpose: Dashboard endpoints

- Headline metrics
- Upcoming deadlines widget
- Recent activity feed
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from app.db.memory import MemStorage, get_storage
from app.schemas.dashboard import Activity, DashboardMetrics
from app.schemas.reminder import ReminderView
from app.services.dashboard_service import recent_activities, upcoming_deadlines
from utils.time_utils import utcnow

router = APIRouter(prefix="/dashboard")


@router.get("/metrics", response_model=DashboardMetrics)
async def get_metrics(storage: MemStorage = Depends(get_storage)):
    """Total clients, upcoming dues, outstanding amount and this month's revenue."""
    return storage.get_dashboard_metrics(now=utcnow())


@router.get("/upcoming", response_model=List[ReminderView])
async def get_upcoming_deadlines(
    limit: int = Query(4, ge=1, le=50),
    storage: MemStorage = Depends(get_storage),
):
    """Pending reminders due within the upcoming window, soonest first."""
    return upcoming_deadlines(
        storage.get_all_reminders(),
        storage.clients,
        now=utcnow(),
        window_days=storage.upcoming_window_days,
        limit=limit,
    )


@router.get("/activities", response_model=List[Activity])
async def get_recent_activities(
    limit: int = Query(5, ge=1, le=50),
    storage: MemStorage = Depends(get_storage),
):
    return recent_activities(
        storage.get_all_clients(),
        storage.get_all_payments(),
        limit=limit,
    )
