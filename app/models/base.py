"""
app/models/base.py

Purpose: Shared base for records and payloads

- snake_case attributes in Python, camelCase keys on the wire
- Either spelling accepted on input
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
