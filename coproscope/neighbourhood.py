"""Score bands and neighbourhood score statistics."""

from __future__ import annotations

import statistics
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from coproscope.models.enums import ScoreBand

if TYPE_CHECKING:
    from collections.abc import Iterable

GOOD_THRESHOLD = 70
MEDIUM_THRESHOLD = 40
DEFAULT_RADIUS_M = 300


def score_band(score: int | None) -> ScoreBand:
    """Classify a global score: >= 70 good, >= 40 medium, else attention."""
    if score is None:
        return ScoreBand.UNKNOWN
    if score >= GOOD_THRESHOLD:
        return ScoreBand.GOOD
    if score >= MEDIUM_THRESHOLD:
        return ScoreBand.MEDIUM
    return ScoreBand.ATTENTION


class NeighbourhoodSummary(BaseModel):
    """Distribution of global scores among condominiums around a point."""

    model_config = ConfigDict(frozen=True)

    mean_score: float
    median_score: int
    count: int
    pct_good: int
    pct_medium: int
    pct_attention: int
    radius_m: int


def summarize_neighbourhood(
    global_scores: Iterable[int | None],
    radius_m: int = DEFAULT_RADIUS_M,
) -> NeighbourhoodSummary | None:
    """Summarize the global scores of nearby condominiums.

    The caller runs the radius query; this only aggregates its results.
    Unscored entries (``None``) are ignored.

    Returns:
        The summary, or None when no scored condominium is left.
    """
    scores = [s for s in global_scores if s is not None]
    if not scores:
        return None

    count = len(scores)
    bands = [score_band(s) for s in scores]

    return NeighbourhoodSummary(
        mean_score=float(_quantize(Decimal(sum(scores)) / count, "0.1")),
        median_score=int(_quantize(Decimal(str(statistics.median(scores))), "1")),
        count=count,
        pct_good=_percent(bands.count(ScoreBand.GOOD), count),
        pct_medium=_percent(bands.count(ScoreBand.MEDIUM), count),
        pct_attention=_percent(bands.count(ScoreBand.ATTENTION), count),
        radius_m=radius_m,
    )


def _quantize(value: Decimal, exponent: str) -> Decimal:
    return value.quantize(Decimal(exponent), rounding=ROUND_HALF_UP)


def _percent(part: int, total: int) -> int:
    return int(_quantize(Decimal(part * 100) / total, "1"))
