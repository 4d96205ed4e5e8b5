"""Timeline event model."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)

from pydantic import BaseModel, ConfigDict

from coproscope.models.enums import TimelineCategory  # noqa: TCH001


class TimelineEvent(BaseModel):
    """A dated fact about a condominium.

    ``sort_key`` orders events even when several share a date; it is the
    date in epoch milliseconds, shifted by one unit for some tie-breaks.
    """

    model_config = ConfigDict(frozen=True)

    occurred_at: date
    sort_key: int
    category: TimelineCategory
    title: str
    description: str
    date_label: str | None = None
