"""Plain-language explanations of each score dimension."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coproscope.formatting import format_evolution, format_period
from coproscope.models.enums import ConstructionPeriod, EnergyClass, SyndicType
from coproscope.scoring import has_usable_market_data

if TYPE_CHECKING:
    from coproscope.models.snapshot import EntitySnapshot

_PRE_1975 = frozenset({
    ConstructionPeriod.BEFORE_1949,
    ConstructionPeriod.FROM_1949_TO_1960,
    ConstructionPeriod.FROM_1961_TO_1974,
})
_RECENT = frozenset({ConstructionPeriod.FROM_2001_TO_2010, ConstructionPeriod.FROM_2011})

_PROCEDURE_SENTENCES: tuple[tuple[str, str], ...] = (
    (
        "provisional_administration",
        "The condominium is under provisional administration, a court-appointed"
        " manager has replaced the syndic.",
    ),
    (
        "imminent_peril_order",
        "An imminent peril order is on record, pointing to an urgent structural"
        " or safety hazard.",
    ),
    (
        "in_risk_prevention_plan",
        "It is listed in a public risk-prevention plan, which means the"
        " authorities have identified structural or safety issues.",
    ),
    (
        "unsanitary_procedure",
        "An unsanitary-housing procedure is open against the building.",
    ),
    (
        "ordinary_peril_order",
        "An ordinary peril order requires repairs within a set deadline.",
    ),
    (
        "common_equipment_procedure",
        "A procedure concerns the safety of common equipment.",
    ),
    (
        "ad_hoc_mandate",
        "An ad-hoc mandate has been granted to help the condominium recover"
        " from financial difficulties.",
    ),
)


def explain_score(snapshot: EntitySnapshot) -> dict[str, str]:
    """Return one explanation per dimension, keyed by dimension name."""
    return {
        "technical": explain_technical(snapshot),
        "risk": explain_risk(snapshot),
        "governance": explain_governance(snapshot),
        "energy": explain_energy(snapshot),
        "market": explain_market(snapshot),
    }


def explain_technical(snapshot: EntitySnapshot) -> str:
    period = snapshot.construction_period
    if period is None:
        return (
            "The construction period is not recorded for this condominium, which"
            " limits the assessment of the building's condition. Without it, the"
            " technical score relies on a neutral default."
        )

    label = format_period(period)
    if period is ConstructionPeriod.BEFORE_1949:
        return (
            f"Building constructed {label}. Buildings of this era often need major"
            " renovation work on the roof, facade and pipes. Common areas and"
            " insulation may also need to be brought up to current standards."
        )
    if period in _PRE_1975:
        return (
            f"Building constructed {label}, before the first thermal regulations."
            " Insulation is usually insufficient and shared equipment may be"
            " ageing. Energy renovation and compliance works are likely."
        )
    if period in _RECENT:
        return (
            f"Building constructed {label}, under modern thermal standards. The"
            " structure is recent with good insulation and compliant equipment,"
            " so maintenance costs are generally under control."
        )
    return (
        f"Building constructed {label}. This period benefits from the first"
        " thermal regulations, but insulation often remains perfectible. Shared"
        " equipment may need renewal after several decades of use."
    )


def explain_risk(snapshot: EntitySnapshot) -> str:
    parts = [
        sentence
        for attribute, sentence in _PROCEDURE_SENTENCES
        if getattr(snapshot, attribute) is True
    ]
    if not parts:
        return (
            "No particular risk has been identified for this condominium. It is"
            " not subject to any peril, unsanitary-housing or administration"
            " procedure on record, which is a positive signal for stability."
        )
    return " ".join(parts)


def explain_governance(snapshot: EntitySnapshot) -> str:
    parts: list[str] = []

    syndic = snapshot.syndic_type
    if syndic is SyndicType.PROFESSIONAL:
        parts.append(
            "The condominium is managed by a professional syndic, which generally"
            " ensures rigorous administrative and accounting follow-up."
        )
    elif syndic is SyndicType.VOLUNTEER:
        parts.append(
            "The condominium is managed by a volunteer syndic. This can reduce"
            " charges but relies heavily on the involvement of the co-owners."
        )
    elif syndic is SyndicType.OTHER:
        parts.append("The syndic is of an unusual type for the registry.")
    else:
        parts.append(
            "The syndic type is not recorded, which may indicate that the registry"
            " entry has not been kept up to date."
        )

    if snapshot.is_cooperative:
        parts.append(
            "It is a cooperative syndicate where the co-owners manage the building"
            " directly, which favours transparent decisions."
        )

    lots = snapshot.total_lots
    if lots is not None:
        if lots <= 10:
            parts.append(
                f"With only {lots} lots, decisions in the general assembly are"
                " easier to reach."
            )
        elif lots <= 50:
            parts.append(
                f"The condominium has {lots} lots, a medium size balancing shared"
                " charges and responsiveness."
            )
        else:
            parts.append(
                f"With {lots} lots, this is a large condominium whose governance"
                " needs a structured organisation and an active council."
            )

    return " ".join(parts)


def explain_energy(snapshot: EntitySnapshot) -> str:
    energy = snapshot.energy_class
    if energy is not None:
        if energy in (EnergyClass.A, EnergyClass.B):
            return (
                f"The energy class is {energy}, an excellent energy performance."
                " Heating costs are low and no energy renovation is expected in"
                " the short term."
            )
        if energy in (EnergyClass.C, EnergyClass.D):
            return (
                f"The energy class is {energy}, a fair energy performance. Roof"
                " insulation or window replacement could still reduce consumption."
            )
        return (
            f"The energy class is {energy}, which makes the building energy"
            " intensive. Significant energy renovation is recommended, and rental"
            " restrictions may apply to the least efficient dwellings."
        )

    period = snapshot.construction_period
    if period is not None:
        label = format_period(period)
        if period in _RECENT:
            return (
                "No collective energy diagnostic is available. The building was"
                f" however constructed {label}, under recent thermal regulations,"
                " which suggests a fair energy performance."
            )
        return (
            "No collective energy diagnostic is available. The building was"
            f" constructed {label}: the energy performance is estimated from this"
            " period, when insulation was generally limited."
        )

    return (
        "No energy diagnostic is available and the construction period is not"
        " recorded. The energy score uses a default value, which limits the"
        " reliability of this dimension."
    )


def explain_market(snapshot: EntitySnapshot) -> str:
    if not has_usable_market_data(snapshot):
        return (
            "Too few recent sales were found around the building to assess the"
            " local market. The market score is kept neutral."
        )

    evolution = snapshot.market_annual_price_change_pct
    count = snapshot.market_transaction_count
    assert evolution is not None and count is not None

    parts: list[str] = []
    trend = format_evolution(evolution)
    if evolution >= 3:
        parts.append(f"Prices are rising strongly ({trend} per year), a sign of an attractive area.")
    elif evolution >= 0:
        parts.append(f"Prices are stable to slightly rising ({trend} per year), a balanced market.")
    elif evolution >= -3:
        parts.append(f"Prices are slightly declining ({trend} per year), a market in correction.")
    else:
        parts.append(
            f"Prices are falling significantly ({trend} per year), which may reflect"
            " waning interest in the area."
        )

    if count >= 20:
        parts.append(f"With {count} recent sales, the volume gives good statistical reliability.")
    elif count >= 5:
        parts.append(f"{count} sales were recorded, enough for a reliable estimate.")
    else:
        parts.append(f"Only {count} sales were recorded, so reliability is limited.")

    return " ".join(parts)
