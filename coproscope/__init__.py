"""coproscope condominium enrichment pipeline.

Usage::

    from coproscope import EntitySnapshot, compute_score, estimate_renovation, build_timeline

    snapshot = EntitySnapshot(construction_period="1961-1974", total_lots=24)
    score = compute_score(snapshot)
    estimate = estimate_renovation(snapshot)
    events = build_timeline(snapshot, nearby_transactions, diagnostic_history)
"""

from coproscope.explanations import explain_score
from coproscope.models.enums import (
    ConstructionPeriod,
    EnergyClass,
    Reliability,
    ScoreBand,
    SyndicType,
    TimelineCategory,
)
from coproscope.models.renovation import RenovationEstimate, RenovationLineItem
from coproscope.models.score import ScoreResult
from coproscope.models.snapshot import DiagnosticRecord, EntitySnapshot, TransactionRecord
from coproscope.models.timeline import TimelineEvent
from coproscope.neighbourhood import NeighbourhoodSummary, score_band, summarize_neighbourhood
from coproscope.registry import snapshot_from_registry
from coproscope.renovation import estimate_renovation
from coproscope.scoring import compute_score
from coproscope.services.analysis import AnalysisService, CondoAnalysis
from coproscope.timeline import build_timeline

__all__ = [
    "AnalysisService",
    "CondoAnalysis",
    "ConstructionPeriod",
    "DiagnosticRecord",
    "EnergyClass",
    "EntitySnapshot",
    "NeighbourhoodSummary",
    "Reliability",
    "RenovationEstimate",
    "RenovationLineItem",
    "ScoreBand",
    "ScoreResult",
    "SyndicType",
    "TimelineCategory",
    "TimelineEvent",
    "TransactionRecord",
    "build_timeline",
    "compute_score",
    "estimate_renovation",
    "explain_score",
    "score_band",
    "snapshot_from_registry",
    "summarize_neighbourhood",
]
