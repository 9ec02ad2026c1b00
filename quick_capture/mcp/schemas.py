"""
MCP Schemas Module

This module defines the schemas returned by the parser and the MCP tools.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_serializer


class ParseResult(BaseModel):
    """
    Schema for a parsed task title.

    This schema holds the resolved schedule and the title with the
    date/time phrase removed.
    """
    scheduled_for: datetime
    cleaned_title: str = Field(min_length=1)

    @field_serializer('scheduled_for')
    def serialize_scheduled_for(self, scheduled_for: datetime) -> str:
        return scheduled_for.isoformat()
