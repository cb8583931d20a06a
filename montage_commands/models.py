from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class UserInput:
    minutes: str = ""
    description: str | None = None
    target: str | None = None


class MutationEnvelope(BaseModel):
    query: str
    variables: dict[str, Any] = Field(default_factory=dict)


class SessionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    duration: timedelta | None = None
    projected_end_time: datetime = Field(alias="projectedEndTime")
