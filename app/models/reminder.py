"""
app/models/reminder.py

Purpose: Compliance due-date reminder

- Service due for a client on a given date
- Optional date to start reminding
"""

from datetime import datetime
from typing import Optional

from app.models.base import CamelModel
from app.models.enums import ReminderStatus


class Reminder(CamelModel):
    id: int
    client_id: int
    service_name: str
    due_date: datetime
    reminder_date: Optional[datetime] = None
    status: ReminderStatus = ReminderStatus.PENDING
    notes: Optional[str] = None
