"""Rule-based renovation budget for a condominium.

Each rule below is evaluated in order and may append one line item:

1. **Insulation** — high tier for energy classes E-G or old buildings,
   lower tier for classes C-D; never both.
2. **Facade** — always one item when the construction period is known.
3. **Electrical / plumbing compliance** — buildings up to 1993.
4. **Elevator replacement** — large, pre-1994 condominiums (flat cost).
5. **Roof** — priced per m² of an estimated roof surface.
6. **Fire-safety compliance** — condominiums under a risk-prevention plan.

Costs are in euros and most scale with the number of lots (unknown lot
counts are treated as a single lot).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coproscope.formatting import format_number
from coproscope.models.enums import ConstructionPeriod, EnergyClass, Reliability
from coproscope.models.renovation import RenovationEstimate, RenovationLineItem

if TYPE_CHECKING:
    from coproscope.models.snapshot import EntitySnapshot

INSULATION = "Thermal insulation"
FACADE = "Facade restoration"
ELECTRICAL_PLUMBING = "Electrical/plumbing compliance"
ELEVATOR = "Elevator replacement"
ROOF = "Roof renovation"
FIRE_SAFETY = "Fire-safety compliance"

# Cost ranges per lot, in euros
_INSULATION_HIGH = (8_000, 15_000)
_INSULATION_LOW = (3_000, 8_000)
_FACADE_OLD = (4_000, 8_000)
_FACADE_MID = (2_500, 5_000)
_FACADE_RECENT = (1_000, 3_000)
_ELECTRICAL_OLD = (3_000, 7_000)
_ELECTRICAL_MID = (1_500, 4_000)
_FIRE_SAFETY = (5_000, 15_000)

# Flat range for the whole building
_ELEVATOR = (30_000, 60_000)
_ELEVATOR_MIN_LOTS = 15

# Per m² of estimated roof surface
_ROOF_M2_PER_LOT = 60
_ROOF_OLD = (150, 300)
_ROOF_MID = (80, 150)

_POOR_CLASSES = frozenset({EnergyClass.E, EnergyClass.F, EnergyClass.G})
_GOOD_CLASSES = frozenset({EnergyClass.A, EnergyClass.B})
_AVERAGE_CLASSES = frozenset({EnergyClass.C, EnergyClass.D})


def estimate_renovation(snapshot: EntitySnapshot) -> RenovationEstimate:
    """Estimate the probable renovation works for a condominium.

    Args:
        snapshot: The condominium to estimate.

    Returns:
        A fresh RenovationEstimate. An empty item list means no major works
        were identified.
    """
    period = snapshot.construction_period
    energy = snapshot.energy_class
    lots = snapshot.total_lots if snapshot.total_lots is not None else 1

    items: list[RenovationLineItem] = []

    # 1. Insulation
    high_tier_added = False
    if energy in _POOR_CLASSES:
        items.append(_per_lot(
            INSULATION,
            f"Energy class {energy}: poorly insulated building, insulation is a priority",
            _INSULATION_HIGH,
            lots,
        ))
        high_tier_added = True
    elif (
        period is not None
        and period.is_before(ConstructionPeriod.FROM_1975_TO_1993)
        and (energy is None or energy in _GOOD_CLASSES)
    ):
        items.append(_per_lot(
            INSULATION,
            "Built before 1975, insulation is likely insufficient",
            _INSULATION_HIGH,
            lots,
        ))
        high_tier_added = True
    if not high_tier_added and energy in _AVERAGE_CLASSES:
        items.append(_per_lot(
            INSULATION,
            f"Energy class {energy}: energy improvements recommended",
            _INSULATION_LOW,
            lots,
        ))

    # 2. Facade
    if period is not None:
        if period.is_at_or_before(ConstructionPeriod.FROM_1949_TO_1960):
            items.append(_per_lot(
                FACADE, "Old building, facade restoration likely needed", _FACADE_OLD, lots,
            ))
        elif period.is_at_or_before(ConstructionPeriod.FROM_1975_TO_1993):
            items.append(_per_lot(
                FACADE, "Built 1961-1993, facade restoration to anticipate", _FACADE_MID, lots,
            ))
        else:
            items.append(_per_lot(
                FACADE, "Recent building, routine upkeep", _FACADE_RECENT, lots,
            ))

    # 3. Electrical / plumbing
    if period is not None:
        if period.is_before(ConstructionPeriod.FROM_1961_TO_1974):
            items.append(_per_lot(
                ELECTRICAL_PLUMBING,
                "Installations predating 1961, upgrade to current standards likely",
                _ELECTRICAL_OLD,
                lots,
            ))
        elif period.is_at_or_before(ConstructionPeriod.FROM_1975_TO_1993):
            items.append(_per_lot(
                ELECTRICAL_PLUMBING,
                "Installations from 1961-1993, inspection recommended",
                _ELECTRICAL_MID,
                lots,
            ))

    # 4. Elevator
    if (
        lots >= _ELEVATOR_MIN_LOTS
        and period is not None
        and period.is_before(ConstructionPeriod.FROM_1994_TO_2000)
    ):
        items.append(RenovationLineItem(
            name=ELEVATOR,
            description=f"{_ELEVATOR_MIN_LOTS}+ lots, elevator likely outdated",
            min_cost=_ELEVATOR[0],
            max_cost=_ELEVATOR[1],
        ))

    # 5. Roof
    if period is not None:
        surface = lots * _ROOF_M2_PER_LOT
        if period.is_before(ConstructionPeriod.FROM_1961_TO_1974):
            items.append(_per_unit(
                ROOF,
                f"Old construction, roof surface estimated at {format_number(surface)} m²",
                _ROOF_OLD,
                surface,
            ))
        elif period.is_before(ConstructionPeriod.FROM_2001_TO_2010):
            items.append(_per_unit(
                ROOF,
                f"Roof from 1961-2000, surface estimated at {format_number(surface)} m²",
                _ROOF_MID,
                surface,
            ))

    # 6. Fire safety
    if snapshot.in_risk_prevention_plan:
        items.append(_per_lot(
            FIRE_SAFETY,
            "Risk-prevention plan: mandatory safety works",
            _FIRE_SAFETY,
            lots,
        ))

    return RenovationEstimate(
        items=tuple(items),
        total_min=sum(item.min_cost for item in items),
        total_max=sum(item.max_cost for item in items),
        reliability=_reliability(snapshot),
    )


def _reliability(snapshot: EntitySnapshot) -> Reliability:
    if snapshot.energy_class is not None and snapshot.construction_period is not None:
        return Reliability.HIGH
    if snapshot.construction_period is not None:
        return Reliability.MEDIUM
    return Reliability.LOW


def _per_lot(
    name: str, description: str, cost_range: tuple[int, int], lots: int,
) -> RenovationLineItem:
    return _per_unit(name, description, cost_range, lots)


def _per_unit(
    name: str, description: str, cost_range: tuple[int, int], quantity: int,
) -> RenovationLineItem:
    low, high = cost_range
    return RenovationLineItem(
        name=name,
        description=description,
        min_cost=low * quantity,
        max_cost=high * quantity,
    )
