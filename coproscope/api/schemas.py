"""Request bodies for the HTTP API."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)
from typing import Any

from pydantic import BaseModel, Field

from coproscope.models.snapshot import (  # noqa: TCH001
    DiagnosticRecord,
    EntitySnapshot,
    TransactionRecord,
)


class AnalysisRequest(BaseModel):
    """A snapshot plus the historical rows the timeline needs."""

    snapshot: EntitySnapshot
    nearby_transactions: list[TransactionRecord] = Field(default_factory=list)
    diagnostic_history: list[DiagnosticRecord] = Field(default_factory=list)
    as_of: date | None = None


class RegistryAnalysisRequest(BaseModel):
    """A raw registry row plus the historical rows the timeline needs."""

    record: dict[str, Any]
    nearby_transactions: list[TransactionRecord] = Field(default_factory=list)
    diagnostic_history: list[DiagnosticRecord] = Field(default_factory=list)
    as_of: date | None = None
