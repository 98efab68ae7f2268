from pydantic import Field

from app.models.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
