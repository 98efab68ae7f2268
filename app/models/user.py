"""
app/models/user.py

Purpose: Practice user account (store only; no login flow)
"""

from app.models.base import CamelModel


class User(CamelModel):
    id: int
    username: str
    password: str
