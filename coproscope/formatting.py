"""Formatting helpers for scores, estimates and timelines.

Amounts follow the French convention used by the registries the data comes
from (e.g. '160 000 €' rather than '€160,000.00').
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from coproscope.models.enums import ConstructionPeriod

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date

PERIOD_LABELS: Mapping[ConstructionPeriod, str] = MappingProxyType({
    ConstructionPeriod.BEFORE_1949: "before 1949",
    ConstructionPeriod.FROM_1949_TO_1960: "between 1949 and 1960",
    ConstructionPeriod.FROM_1961_TO_1974: "between 1961 and 1974",
    ConstructionPeriod.FROM_1975_TO_1993: "between 1975 and 1993",
    ConstructionPeriod.FROM_1994_TO_2000: "between 1994 and 2000",
    ConstructionPeriod.FROM_2001_TO_2010: "between 2001 and 2010",
    ConstructionPeriod.FROM_2011: "from 2011 onward",
})


def format_number(value: float) -> str:
    """Round to an integer and group thousands with spaces: '1 234 567'."""
    return f"{round(value):,}".replace(",", " ")


def format_area(value: float) -> str:
    """Area with at most one decimal and spaced thousands: '62.5', '1 234 567'."""
    text = f"{value:,.1f}".removesuffix(".0")
    return text.replace(",", " ")


def format_euros(amount: float) -> str:
    """Format an amount in euros, e.g. '160 000 €'."""
    return f"{format_number(amount)} €"


def format_cost_range(low: float, high: float) -> str:
    """Format a min/max cost range.

    - Millions (high >= 1M): 'X.X M€ - X.X M€'
    - Below 1M: 'XXX XXX € - XXX XXX €'
    """
    if high >= 1_000_000:
        return f"{low / 1_000_000:.1f} M€ - {high / 1_000_000:.1f} M€"
    return f"{format_euros(low)} - {format_euros(high)}"


def format_period(period: ConstructionPeriod | None) -> str | None:
    """Human label for a construction period, or None when unknown."""
    if period is None:
        return None
    return PERIOD_LABELS[period]


def format_date(value: date) -> str:
    """Format a date as DD/MM/YYYY."""
    return value.strftime("%d/%m/%Y")


def format_evolution(pct: float) -> str:
    """Signed percentage with one decimal, e.g. '+6.0 %'."""
    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct:.1f} %"
