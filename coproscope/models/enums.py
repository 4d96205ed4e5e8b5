"""Enums for the coproscope domain models.

These enums represent the bucketed registry values that drive scoring,
renovation estimates and timelines.
"""

from __future__ import annotations

from enum import StrEnum


class ConstructionPeriod(StrEnum):
    """Bucketed construction period, declared oldest first."""

    BEFORE_1949 = "before1949"
    FROM_1949_TO_1960 = "1949-1960"
    FROM_1961_TO_1974 = "1961-1974"
    FROM_1975_TO_1993 = "1975-1993"
    FROM_1994_TO_2000 = "1994-2000"
    FROM_2001_TO_2010 = "2001-2010"
    FROM_2011 = "2011-onward"

    @property
    def rank(self) -> int:
        """Position in chronological order (0 = oldest)."""
        return _PERIOD_ORDER.index(self)

    def is_before(self, other: ConstructionPeriod) -> bool:
        return self.rank < other.rank

    def is_at_or_before(self, other: ConstructionPeriod) -> bool:
        return self.rank <= other.rank


_PERIOD_ORDER: tuple[ConstructionPeriod, ...] = tuple(ConstructionPeriod)


class SyndicType(StrEnum):
    """Kind of syndic managing the condominium."""

    PROFESSIONAL = "professional"
    VOLUNTEER = "volunteer"
    OTHER = "other"


class EnergyClass(StrEnum):
    """Energy-performance diagnostic class, A (best) to G (worst)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def rank(self) -> int:
        """0 for A up to 6 for G."""
        return "ABCDEFG".index(self.value)


class Reliability(StrEnum):
    """Input completeness of a renovation estimate."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TimelineCategory(StrEnum):
    """Kind of fact a timeline event was derived from."""

    CONSTRUCTION = "construction"
    ADMINISTRATIVE = "administrative"
    ENERGY = "energy"
    TRANSACTION = "transaction"
    RISK = "risk"
    GOVERNANCE = "governance"


class ScoreBand(StrEnum):
    """Coarse reading of a global score."""

    GOOD = "good"
    MEDIUM = "medium"
    ATTENTION = "attention"
    UNKNOWN = "unknown"
