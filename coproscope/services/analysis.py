"""Analysis service: runs scoring, renovation and timeline for one condominium."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from coproscope.explanations import explain_score
from coproscope.renovation import estimate_renovation
from coproscope.scoring import compute_score
from coproscope.timeline import build_timeline

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from coproscope.models.renovation import RenovationEstimate
    from coproscope.models.score import ScoreResult
    from coproscope.models.snapshot import DiagnosticRecord, EntitySnapshot, TransactionRecord
    from coproscope.models.timeline import TimelineEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CondoAnalysis:
    """Everything computed for one condominium."""

    score: ScoreResult
    renovation: RenovationEstimate
    timeline: list[TimelineEvent]
    explanations: dict[str, str]
    processing_time_seconds: float

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for API responses and exports."""
        return {
            "score": self.score.model_dump(mode="json"),
            "score_summary": self.score.to_summary_dict(),
            "renovation": self.renovation.model_dump(mode="json"),
            "renovation_summary": self.renovation.to_summary_dict(),
            "timeline": [event.model_dump(mode="json") for event in self.timeline],
            "explanations": self.explanations,
            "processing_time_seconds": self.processing_time_seconds,
        }


class AnalysisService:
    """Composes the three independent computations into one CondoAnalysis.

    Holds no state between calls, so one instance can be shared across
    threads or requests.
    """

    def analyze(
        self,
        snapshot: EntitySnapshot,
        nearby_transactions: Iterable[TransactionRecord] = (),
        diagnostic_history: Iterable[DiagnosticRecord] = (),
        as_of: date | None = None,
    ) -> CondoAnalysis:
        """Score, estimate and build the timeline of a condominium.

        Args:
            snapshot: The condominium.
            nearby_transactions: Pre-limited nearby sales for the timeline.
            diagnostic_history: Energy diagnostics for the timeline.
            as_of: Date standing for "now" in the timeline.
        """
        start = time.monotonic()

        score = compute_score(snapshot)
        renovation = estimate_renovation(snapshot)
        timeline = build_timeline(
            snapshot,
            nearby_transactions=nearby_transactions,
            diagnostic_history=diagnostic_history,
            as_of=as_of,
        )
        explanations = explain_score(snapshot)

        elapsed = time.monotonic() - start
        logger.info(
            "Analyzed condominium %s: score %d (confidence %d%%), %d works items, "
            "%d timeline events in %.4fs",
            snapshot.entity_id or "<anonymous>",
            score.global_score,
            score.confidence,
            len(renovation.items),
            len(timeline),
            elapsed,
        )

        return CondoAnalysis(
            score=score,
            renovation=renovation,
            timeline=timeline,
            explanations=explanations,
            processing_time_seconds=elapsed,
        )
