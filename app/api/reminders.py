"""
app/api/reminders.py

Purpose: Compliance reminder endpoints

- Listing with status filter and search, each reminder carrying its
  effective status, client name and urgency
- Summary counts
- Create, update, delete
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.core.exceptions import ResourceNotFoundError
from app.db.memory import MemStorage, get_storage
from app.models.reminder import Reminder
from app.schemas.reminder import ReminderCreate, ReminderSummary, ReminderUpdate, ReminderView
from app.services.reminder_service import STATUS_FILTER_ALL, filter_reminders, summarize_reminders
from utils.time_utils import utcnow

router = APIRouter()

StatusFilter = Literal["all", "pending", "overdue", "completed"]


@router.get("/reminders", response_model=List[ReminderView])
async def list_reminders(
    status: StatusFilter = Query(STATUS_FILTER_ALL),
    search: Optional[str] = Query(None),
    storage: MemStorage = Depends(get_storage),
):
    """
    Reminders by due date, earliest first.

    status matches the effective status, so "overdue" includes pending
    reminders whose due day has passed.
    """
    return filter_reminders(
        storage.get_all_reminders(),
        storage.clients,
        now=utcnow(),
        status=status,
        search=search,
    )


@router.get("/reminders/summary", response_model=ReminderSummary)
async def get_reminder_summary(storage: MemStorage = Depends(get_storage)):
    return summarize_reminders(
        storage.get_all_reminders(),
        now=utcnow(),
        window_days=storage.upcoming_window_days,
    )


@router.get("/clients/{client_id}/reminders", response_model=List[Reminder])
async def list_client_reminders(client_id: int, storage: MemStorage = Depends(get_storage)):
    return storage.get_reminders_by_client_id(client_id)


@router.post("/reminders", response_model=Reminder, status_code=201)
async def create_reminder(payload: ReminderCreate, storage: MemStorage = Depends(get_storage)):
    return storage.create_reminder(payload)


@router.put("/reminders/{reminder_id}", response_model=Reminder)
async def update_reminder(
    reminder_id: int,
    payload: ReminderUpdate,
    storage: MemStorage = Depends(get_storage),
):
    reminder = storage.update_reminder(reminder_id, payload)
    if reminder is None:
        raise ResourceNotFoundError.for_entity("Reminder", reminderId=reminder_id)
    return reminder


@router.delete("/reminders/{reminder_id}", status_code=204)
async def delete_reminder(reminder_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_reminder(reminder_id):
        raise ResourceNotFoundError.for_entity("Reminder", reminderId=reminder_id)
    return Response(status_code=204)
