"""Domain models for the coproscope enrichment pipeline."""

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

__all__ = [
    "ConstructionPeriod",
    "DiagnosticRecord",
    "EnergyClass",
    "EntitySnapshot",
    "Reliability",
    "RenovationEstimate",
    "RenovationLineItem",
    "ScoreBand",
    "ScoreResult",
    "SyndicType",
    "TimelineCategory",
    "TimelineEvent",
    "TransactionRecord",
]
