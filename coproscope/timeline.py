"""Chronological event history for a condominium.

Merges construction period, registry dates, energy diagnostics, nearby sales
and the current risk and governance state into one list, most recent first.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import TYPE_CHECKING

from coproscope.formatting import (
    format_area,
    format_date,
    format_euros,
    format_number,
    format_period,
)
from coproscope.models.enums import ConstructionPeriod, TimelineCategory
from coproscope.models.timeline import TimelineEvent

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from coproscope.models.snapshot import DiagnosticRecord, EntitySnapshot, TransactionRecord

# Representative year used to place each period on the timeline
PERIOD_ANCHOR_YEAR: Mapping[ConstructionPeriod, int] = MappingProxyType({
    ConstructionPeriod.BEFORE_1949: 1940,
    ConstructionPeriod.FROM_1949_TO_1960: 1955,
    ConstructionPeriod.FROM_1961_TO_1974: 1968,
    ConstructionPeriod.FROM_1975_TO_1993: 1984,
    ConstructionPeriod.FROM_1994_TO_2000: 1997,
    ConstructionPeriod.FROM_2001_TO_2010: 2006,
    ConstructionPeriod.FROM_2011: 2015,
})

_EPOCH = date(1970, 1, 1)
_MS_PER_DAY = 86_400_000


def build_timeline(
    snapshot: EntitySnapshot,
    nearby_transactions: Iterable[TransactionRecord] = (),
    diagnostic_history: Iterable[DiagnosticRecord] = (),
    as_of: date | None = None,
) -> list[TimelineEvent]:
    """Build the event history of a condominium, most recent first.

    Args:
        snapshot: The condominium.
        nearby_transactions: Sales around the building. Callers limit this
            list (typically to the 10 most recent); every entry becomes an
            event.
        diagnostic_history: Energy diagnostics; undated ones are skipped.
        as_of: Date standing for "now" when a risk-prevention plan is on
            record without a last-update date. Defaults to today.

    Returns:
        A new list sorted by ``sort_key`` descending. Same-day events from
        the last registry update are ordered: update, governance, risk.
    """
    events: list[TimelineEvent] = []

    period = snapshot.construction_period
    if period is not None:
        label = format_period(period)
        assert label is not None
        anchor = date(PERIOD_ANCHOR_YEAR[period], 1, 1)
        events.append(TimelineEvent(
            occurred_at=anchor,
            sort_key=_natural_key(anchor),
            category=TimelineCategory.CONSTRUCTION,
            title="Building constructed",
            description=f"Period: {label}",
            date_label=label[0].upper() + label[1:],
        ))

    if snapshot.bylaw_date is not None:
        events.append(TimelineEvent(
            occurred_at=snapshot.bylaw_date,
            sort_key=_natural_key(snapshot.bylaw_date),
            category=TimelineCategory.ADMINISTRATIVE,
            title="Co-ownership bylaws",
            description=f"Established on {format_date(snapshot.bylaw_date)}",
        ))

    if snapshot.registration_date is not None:
        events.append(TimelineEvent(
            occurred_at=snapshot.registration_date,
            sort_key=_natural_key(snapshot.registration_date),
            category=TimelineCategory.ADMINISTRATIVE,
            title="Registered in the national registry",
            description=f"Registered on {format_date(snapshot.registration_date)}",
        ))

    for diagnostic in diagnostic_history:
        if diagnostic.diagnosed_on is None:
            continue
        class_text = (
            f"class {diagnostic.energy_class}"
            if diagnostic.energy_class is not None
            else "unknown class"
        )
        events.append(TimelineEvent(
            occurred_at=diagnostic.diagnosed_on,
            sort_key=_natural_key(diagnostic.diagnosed_on),
            category=TimelineCategory.ENERGY,
            title="Energy diagnostic",
            description=f"Energy performance diagnostic: {class_text}",
        ))

    for transaction in nearby_transactions:
        events.append(TimelineEvent(
            occurred_at=transaction.sold_on,
            sort_key=_natural_key(transaction.sold_on),
            category=TimelineCategory.TRANSACTION,
            title="Property sale",
            description=_describe_transaction(transaction),
        ))

    last_update = snapshot.last_update_date

    if snapshot.in_risk_prevention_plan:
        risk_date = last_update if last_update is not None else (as_of or date.today())
        events.append(TimelineEvent(
            occurred_at=risk_date,
            sort_key=_natural_key(risk_date) - 1,
            category=TimelineCategory.RISK,
            title="Risk-prevention plan",
            description="Listed in a public risk-prevention plan",
        ))

    if snapshot.syndic_type is not None and last_update is not None:
        syndic_label = snapshot.syndic_type.value.capitalize()
        events.append(TimelineEvent(
            occurred_at=last_update,
            sort_key=_natural_key(last_update),
            category=TimelineCategory.GOVERNANCE,
            title=f"{syndic_label} syndic in place",
            description=f"Management type observed on {format_date(last_update)}",
        ))

    if last_update is not None:
        events.append(TimelineEvent(
            occurred_at=last_update,
            sort_key=_natural_key(last_update) + 1,
            category=TimelineCategory.ADMINISTRATIVE,
            title="Registry data updated",
            description=f"Last updated on {format_date(last_update)}",
        ))

    return sorted(events, key=lambda event: event.sort_key, reverse=True)


def _natural_key(value: date) -> int:
    """Milliseconds since the epoch at midnight UTC."""
    return (value - _EPOCH).days * _MS_PER_DAY


def _describe_transaction(transaction: TransactionRecord) -> str:
    price = format_euros(transaction.price)
    price_per_area = transaction.effective_price_per_area
    if transaction.area and price_per_area is not None:
        area = format_area(transaction.area)
        return f"{area} m² at {format_number(price_per_area)} €/m² ({price})"
    return f"Sold for {price}"
