"""
app/schemas/reminder.py

Purpose: Reminder payloads and derived views

- ReminderCreate / ReminderUpdate request bodies
- Urgency, summary and dashboard deadline shapes
"""

from typing import Optional

from pydantic import Field, field_validator

from app.models.base import CamelModel
from app.models.enums import ReminderStatus, UrgencyTier
from app.models.reminder import Reminder
from app.schemas.base import OptionalStr, OptionalUtcDatetime, UtcDatetime, reject_null


class ReminderCreate(CamelModel):
    """Payload for POST /reminders."""

    client_id: int
    service_name: str = Field(..., min_length=1)
    due_date: UtcDatetime
    reminder_date: OptionalUtcDatetime = None
    status: ReminderStatus = ReminderStatus.PENDING
    notes: OptionalStr = None


class ReminderUpdate(CamelModel):
    """Payload for PUT /reminders/{id}; only supplied fields change."""

    client_id: Optional[int] = None
    service_name: Optional[str] = Field(None, min_length=1)
    due_date: Optional[UtcDatetime] = None
    reminder_date: OptionalUtcDatetime = None
    status: Optional[ReminderStatus] = None
    notes: OptionalStr = None

    @field_validator("client_id", "service_name", "due_date", "status")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class Urgency(CamelModel):
    days: int
    tier: UrgencyTier
    label: str
    color: str


class ReminderView(Reminder):
    """A reminder with its derived display state."""

    effective_status: ReminderStatus
    client_name: str
    urgency: Urgency


class ReminderSummary(CamelModel):
    total: int
    upcoming: int
    overdue: int
    completed: int
