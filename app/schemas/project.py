"""Pydantic schemas that describe project payloads for the API."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    client_id: int
    description: Optional[str] = None
    created_at: str
    updated_at: str


class HoursSummary(BaseModel):
    project_id: int
    hours: Decimal = Decimal("0")
    uninvoiced_hours: Decimal = Decimal("0")
    work_unit_count: int = 0


class ProjectDetail(ProjectOut):
    hours: Decimal = Decimal("0")
    uninvoiced_hours: Decimal = Decimal("0")
    ticket_count: int = 0


class TimelineEntryOut(BaseModel):
    kind: Literal["comment", "file_attachment"]
    id: int
    created_at: str
    title: Optional[str] = None
    body: Optional[str] = None
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size_bytes: Optional[int] = Field(default=None, ge=0)
