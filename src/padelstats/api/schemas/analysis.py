from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FormatRequest(BaseModel):
    payload: dict[str, Any]
    match_id: str | None = None
    user_id: str | None = None
    body_mass_kg: float | None = Field(default=None, gt=0.0)


class MetricErrorDetail(BaseModel):
    message: str
    field: str
    value: str
