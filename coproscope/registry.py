"""Adapter from raw national-registry rows to EntitySnapshot.

Registry exports use French labels and loosely typed columns (``"oui"`` /
``"non"``, numbers stored as text, ``NON_CONNUE`` for missing periods).
``snapshot_from_registry`` maps one such row onto the domain model:

==============================  ==============================
Registry column                 Snapshot field
==============================  ==============================
numero_immatriculation          entity_id
periode_construction            construction_period
type_syndic                     syndic_type
syndicat_cooperatif             is_cooperative
nb_total_lots                   total_lots
fonds_travaux                   works_fund_contribution
copro_dans_pdp                  in_risk_prevention_plan (count > 0)
administration_provisoire       provisional_administration
procedure_insalubrite           unsanitary_procedure
procedure_equipements_communs   common_equipment_procedure
arrete_peril_ordinaire          ordinary_peril_order
arrete_peril_imminent           imminent_peril_order
mandat_ad_hoc                   ad_hoc_mandate
dpe_classe_mediane              energy_class
chauffage_collectif             collective_heating_known
ascenseur                       has_elevator
nb_etages                       floor_count
gardien                         has_caretaker
marche_evolution                market_annual_price_change_pct
marche_nb_transactions          market_transaction_count
date_reglement_copropriete      bylaw_date
date_immatriculation            registration_date
date_derniere_maj               last_update_date
==============================  ==============================

Missing columns and empty values map to ``None``. Values that are present
but unparseable raise ``RegistryParseError``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from coproscope.exceptions import RegistryParseError
from coproscope.models.enums import ConstructionPeriod, EnergyClass, SyndicType
from coproscope.models.snapshot import EntitySnapshot

if TYPE_CHECKING:
    from collections.abc import Mapping

_UNKNOWN_LABELS = frozenset({"", "NON_CONNUE", "NON_RENSEIGNÉ", "NON_RENSEIGNE"})

# Checked in order: the first label fragments all found in the value win
_PERIOD_PATTERNS: tuple[tuple[tuple[str, ...], ConstructionPeriod], ...] = (
    (("AVANT_1949",), ConstructionPeriod.BEFORE_1949),
    (("1949", "1960"), ConstructionPeriod.FROM_1949_TO_1960),
    (("1961", "1974"), ConstructionPeriod.FROM_1961_TO_1974),
    (("1975", "1993"), ConstructionPeriod.FROM_1975_TO_1993),
    (("1994", "2000"), ConstructionPeriod.FROM_1994_TO_2000),
    (("2001", "2010"), ConstructionPeriod.FROM_2001_TO_2010),
    (("2011",), ConstructionPeriod.FROM_2011),
)

_TRUE_LABELS = frozenset({"oui", "yes", "true", "vrai", "1", "o", "y"})
_FALSE_LABELS = frozenset({"non", "no", "false", "faux", "0", "n"})

_BOOLEAN_COLUMNS: tuple[tuple[str, str], ...] = (
    ("syndicat_cooperatif", "is_cooperative"),
    ("administration_provisoire", "provisional_administration"),
    ("procedure_insalubrite", "unsanitary_procedure"),
    ("procedure_equipements_communs", "common_equipment_procedure"),
    ("arrete_peril_ordinaire", "ordinary_peril_order"),
    ("arrete_peril_imminent", "imminent_peril_order"),
    ("mandat_ad_hoc", "ad_hoc_mandate"),
    ("chauffage_collectif", "collective_heating_known"),
    ("ascenseur", "has_elevator"),
    ("gardien", "has_caretaker"),
)

_DATE_COLUMNS: tuple[tuple[str, str], ...] = (
    ("date_reglement_copropriete", "bylaw_date"),
    ("date_immatriculation", "registration_date"),
    ("date_derniere_maj", "last_update_date"),
)


def parse_period(value: str | None) -> ConstructionPeriod | None:
    """Map a registry period label (e.g. ``DE_1961_A_1974``) to a bucket."""
    if value is None:
        return None
    try:
        return ConstructionPeriod(value.strip())
    except ValueError:
        pass

    label = "_".join(value.upper().split())
    if label in _UNKNOWN_LABELS:
        return None
    for fragments, period in _PERIOD_PATTERNS:
        if all(fragment in label for fragment in fragments):
            return period
    return None


def parse_syndic_type(value: str | None) -> SyndicType | None:
    """Map a registry syndic label; any other non-empty label is OTHER."""
    if value is None:
        return None
    label = value.strip().lower()
    if not label:
        return None
    if label in ("professionnel", "professional"):
        return SyndicType.PROFESSIONAL
    if label in ("bénévole", "benevole", "volunteer"):
        return SyndicType.VOLUNTEER
    return SyndicType.OTHER


def parse_energy_class(value: str | None) -> EnergyClass | None:
    """Map an energy class letter; anything outside A-G is unknown."""
    if value is None:
        return None
    try:
        return EnergyClass(value.strip().upper())
    except ValueError:
        return None


def snapshot_from_registry(record: Mapping[str, Any]) -> EntitySnapshot:
    """Build an EntitySnapshot from one raw registry row.

    Raises:
        RegistryParseError: If a present value cannot be parsed.
        pydantic.ValidationError: If a parsed value is out of range for
            EntitySnapshot (e.g. a negative lot count or a non-finite number).
    """
    fields: dict[str, Any] = {
        "entity_id": _text(record.get("numero_immatriculation")),
        "construction_period": parse_period(_text(record.get("periode_construction"))),
        "syndic_type": parse_syndic_type(_text(record.get("type_syndic"))),
        "total_lots": _parse_int(record, "nb_total_lots"),
        "works_fund_contribution": _parse_float(record, "fonds_travaux"),
        "energy_class": parse_energy_class(_text(record.get("dpe_classe_mediane"))),
        "floor_count": _parse_int(record, "nb_etages"),
        "market_annual_price_change_pct": _parse_float(record, "marche_evolution"),
        "market_transaction_count": _parse_int(record, "marche_nb_transactions"),
    }

    pdp_count = _parse_int(record, "copro_dans_pdp")
    fields["in_risk_prevention_plan"] = None if pdp_count is None else pdp_count > 0

    for column, field_name in _BOOLEAN_COLUMNS:
        fields[field_name] = _parse_bool(record, column)
    for column, field_name in _DATE_COLUMNS:
        fields[field_name] = _parse_date(record, column)

    return EntitySnapshot(**fields)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_bool(record: Mapping[str, Any], column: str) -> bool | None:
    value = record.get(column)
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        label = value.strip().lower()
        if label in _TRUE_LABELS:
            return True
        if label in _FALSE_LABELS:
            return False
    raise RegistryParseError(column, value)


def _parse_float(record: Mapping[str, Any], column: str) -> float | None:
    value = record.get(column)
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise RegistryParseError(column, value)
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        cleaned = "".join(value.split()).replace(",", ".")
        try:
            return float(cleaned)
        except ValueError:
            raise RegistryParseError(column, value) from None
    raise RegistryParseError(column, value)


def _parse_int(record: Mapping[str, Any], column: str) -> int | None:
    number = _parse_float(record, column)
    if number is None:
        return None
    if not number.is_integer():
        raise RegistryParseError(column, record.get(column))
    return int(number)


def _parse_date(record: Mapping[str, Any], column: str) -> date | None:
    value = record.get(column)
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise RegistryParseError(column, value) from None
    raise RegistryParseError(column, value)
