"""Five-dimension health score for a condominium.

The score is computed from an EntitySnapshot in five independent dimensions:

1. **Technical** (/25) — construction period, plus elevator and caretaker
   bonuses.
2. **Risk** (/30) — cumulative penalties for each administrative procedure
   on record, floored at zero.
3. **Governance** (/25) — kind of syndic, size bonus for professional
   management, works fund bonus.
4. **Energy** (/20) — energy class when known, construction period otherwise.
5. **Market** (/20) — annual price change around the building, neutral when
   there are too few transactions.

The raw total (/120) is normalized to a global score out of 100. A separate
confidence index measures how many scoring inputs were actually populated.
Missing data always falls back to a defined default, so ``compute_score``
never raises.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from coproscope.models.enums import ConstructionPeriod, EnergyClass, SyndicType
from coproscope.models.score import ScoreResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from coproscope.models.snapshot import EntitySnapshot

TECHNICAL_MAX = 25
RISK_MAX = 30
GOVERNANCE_MAX = 25
ENERGY_MAX = 20
MARKET_MAX = 20

# Sum of the five maxima; a constant, never derived from the tables.
RAW_MAX = 120

MIN_MARKET_TRANSACTIONS = 3
MARKET_NEUTRAL = 10

_TECHNICAL_BY_PERIOD: Mapping[ConstructionPeriod, int] = MappingProxyType({
    ConstructionPeriod.FROM_2011: 25,
    ConstructionPeriod.FROM_2001_TO_2010: 25,
    ConstructionPeriod.FROM_1994_TO_2000: 22,
    ConstructionPeriod.FROM_1975_TO_1993: 18,
    ConstructionPeriod.FROM_1961_TO_1974: 13,
    ConstructionPeriod.FROM_1949_TO_1960: 13,
    ConstructionPeriod.BEFORE_1949: 10,
})
_TECHNICAL_UNKNOWN_PERIOD = 15
_ELEVATOR_BONUS = 2
_ELEVATOR_MIN_FLOORS = 3  # strictly above
_CARETAKER_BONUS = 3

# (attribute, penalty); flags are independent and cumulative
_RISK_PENALTIES: tuple[tuple[str, int], ...] = (
    ("provisional_administration", 20),
    ("imminent_peril_order", 18),
    ("in_risk_prevention_plan", 15),
    ("unsanitary_procedure", 12),
    ("ordinary_peril_order", 10),
    ("common_equipment_procedure", 8),
    ("ad_hoc_mandate", 5),
)

_GOVERNANCE_PROFESSIONAL = 22
_GOVERNANCE_COOPERATIVE = 20
_GOVERNANCE_VOLUNTEER = 15
_GOVERNANCE_DEFAULT = 8
_LARGE_PROFESSIONAL_BONUS = 3
_LARGE_PROFESSIONAL_MIN_LOTS = 10  # strictly above
_WORKS_FUND_BONUS = 2

_ENERGY_BY_CLASS: Mapping[EnergyClass, int] = MappingProxyType({
    EnergyClass.A: 20,
    EnergyClass.B: 17,
    EnergyClass.C: 14,
    EnergyClass.D: 11,
    EnergyClass.E: 8,
    EnergyClass.F: 4,
    EnergyClass.G: 2,
})
_COLLECTIVE_HEATING_BONUS = 1
_ENERGY_RECENT_PERIOD = 14
_ENERGY_OLD_PERIOD = 6
_ENERGY_DEFAULT = 10
_ENERGY_OLD_PERIODS = frozenset({
    ConstructionPeriod.BEFORE_1949,
    ConstructionPeriod.FROM_1949_TO_1960,
    ConstructionPeriod.FROM_1961_TO_1974,
})

# (lower bound in % per year, base score), checked top to bottom
_MARKET_BUCKETS: tuple[tuple[float, int], ...] = (
    (10.0, 20),
    (5.0, 17),
    (0.0, 14),
    (-5.0, 11),
    (-10.0, 8),
)
_MARKET_FLOOR_SCORE = 4
_MARKET_TREND_THRESHOLD = 5.0
_MARKET_TREND_ADJUSTMENT = 2

_CONFIDENCE_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "construction_period": 2,
    "syndic_type": 3,
    "energy_class": 3,
    "in_risk_prevention_plan": 2,
    "market": 2,
    "total_lots": 1,
})


def compute_score(snapshot: EntitySnapshot) -> ScoreResult:
    """Compute the five sub-scores, the global score and the confidence index.

    Args:
        snapshot: The condominium to score. Unknown fields are valid input.

    Returns:
        A fresh ScoreResult; every value is within its documented bounds.
    """
    technical = technical_score(snapshot)
    risk = risk_score(snapshot)
    governance = governance_score(snapshot)
    energy = energy_score(snapshot)
    market = market_score(snapshot)

    raw_total = technical + risk + governance + energy + market

    return ScoreResult(
        global_score=_round_half_up(raw_total * 100, RAW_MAX),
        technical=technical,
        risk=risk,
        governance=governance,
        energy=energy,
        market=market,
        confidence=confidence_index(snapshot),
    )


def technical_score(snapshot: EntitySnapshot) -> int:
    period = snapshot.construction_period
    if period is None:
        score = _TECHNICAL_UNKNOWN_PERIOD
    else:
        score = _TECHNICAL_BY_PERIOD[period]

    if (
        snapshot.has_elevator
        and snapshot.floor_count is not None
        and snapshot.floor_count > _ELEVATOR_MIN_FLOORS
    ):
        score += _ELEVATOR_BONUS
    if snapshot.has_caretaker:
        score += _CARETAKER_BONUS

    return min(score, TECHNICAL_MAX)


def risk_score(snapshot: EntitySnapshot) -> int:
    """Subtract a penalty for each flag that is explicitly set.

    An unknown flag (``None``) is treated as absent.
    """
    score = RISK_MAX
    for attribute, penalty in _RISK_PENALTIES:
        if getattr(snapshot, attribute) is True:
            score -= penalty
    return max(score, 0)


def governance_score(snapshot: EntitySnapshot) -> int:
    syndic = snapshot.syndic_type
    if syndic is None:
        score = _GOVERNANCE_DEFAULT
    elif syndic is SyndicType.PROFESSIONAL:
        score = _GOVERNANCE_PROFESSIONAL
    elif snapshot.is_cooperative:
        score = _GOVERNANCE_COOPERATIVE
    elif syndic is SyndicType.VOLUNTEER:
        score = _GOVERNANCE_VOLUNTEER
    else:
        score = _GOVERNANCE_DEFAULT

    if (
        syndic is SyndicType.PROFESSIONAL
        and snapshot.total_lots is not None
        and snapshot.total_lots > _LARGE_PROFESSIONAL_MIN_LOTS
    ):
        score += _LARGE_PROFESSIONAL_BONUS
    if snapshot.works_fund_contribution is not None and snapshot.works_fund_contribution > 0:
        score += _WORKS_FUND_BONUS

    return min(score, GOVERNANCE_MAX)


def energy_score(snapshot: EntitySnapshot) -> int:
    if snapshot.energy_class is not None:
        score = _ENERGY_BY_CLASS[snapshot.energy_class]
        if snapshot.collective_heating_known:
            score += _COLLECTIVE_HEATING_BONUS
        return min(score, ENERGY_MAX)

    # No diagnostic: estimate from the construction period
    period = snapshot.construction_period
    if period is ConstructionPeriod.FROM_2011:
        return _ENERGY_RECENT_PERIOD
    if period in _ENERGY_OLD_PERIODS:
        return _ENERGY_OLD_PERIOD
    return _ENERGY_DEFAULT


def has_usable_market_data(snapshot: EntitySnapshot) -> bool:
    """True when the market dimension has enough data to be scored."""
    return (
        snapshot.market_annual_price_change_pct is not None
        and snapshot.market_transaction_count is not None
        and snapshot.market_transaction_count >= MIN_MARKET_TRANSACTIONS
    )


def market_score(snapshot: EntitySnapshot) -> int:
    """Score the local price trend; neutral when data is insufficient."""
    if not has_usable_market_data(snapshot):
        return MARKET_NEUTRAL

    evolution = snapshot.market_annual_price_change_pct
    assert evolution is not None

    score = _MARKET_FLOOR_SCORE
    for lower_bound, bucket_score in _MARKET_BUCKETS:
        if evolution >= lower_bound:
            score = bucket_score
            break

    # Strict thresholds: exactly +/-5% gets no adjustment
    if evolution > _MARKET_TREND_THRESHOLD:
        score += _MARKET_TREND_ADJUSTMENT
    elif evolution < -_MARKET_TREND_THRESHOLD:
        score -= _MARKET_TREND_ADJUSTMENT

    return max(0, min(score, MARKET_MAX))


def confidence_index(snapshot: EntitySnapshot) -> int:
    """Weighted percentage of scoring inputs that are populated (0-100)."""
    present = {
        "construction_period": snapshot.construction_period is not None,
        "syndic_type": snapshot.syndic_type is not None,
        "energy_class": snapshot.energy_class is not None,
        "in_risk_prevention_plan": snapshot.in_risk_prevention_plan is not None,
        "market": has_usable_market_data(snapshot),
        "total_lots": snapshot.total_lots is not None,
    }
    earned = sum(weight for name, weight in _CONFIDENCE_WEIGHTS.items() if present[name])
    total = sum(_CONFIDENCE_WEIGHTS.values())
    return _round_half_up(earned * 100, total)


def _round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` half-up using integer arithmetic."""
    return (2 * numerator + denominator) // (2 * denominator)
