"""Tests for the registry-row adapter."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from coproscope.exceptions import CoproscopeError, RegistryParseError
from coproscope.models.enums import ConstructionPeriod, EnergyClass, SyndicType
from coproscope.registry import (
    parse_energy_class,
    parse_period,
    parse_syndic_type,
    snapshot_from_registry,
)


def _record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "numero_immatriculation": "AA1234567",
        "periode_construction": "DE_1961_A_1974",
        "type_syndic": "professionnel",
        "syndicat_cooperatif": "non",
        "nb_total_lots": "24",
        "fonds_travaux": "1 250,50",
        "copro_dans_pdp": 0,
        "dpe_classe_mediane": "e",
        "ascenseur": "oui",
        "nb_etages": 6,
        "marche_evolution": "-2,5",
        "marche_nb_transactions": 14,
        "date_immatriculation": "2017-09-10",
        "date_derniere_maj": datetime(2024, 6, 15, 8, 30),
    }
    record.update(overrides)
    return record


# ---------------------------------------------------------------------------
# Label parsing
# ---------------------------------------------------------------------------


class TestParsePeriod:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("AVANT_1949", ConstructionPeriod.BEFORE_1949),
            ("DE_1949_A_1960", ConstructionPeriod.FROM_1949_TO_1960),
            ("DE_1961_A_1974", ConstructionPeriod.FROM_1961_TO_1974),
            ("DE_1975_A_1993", ConstructionPeriod.FROM_1975_TO_1993),
            ("DE_1994_A_2000", ConstructionPeriod.FROM_1994_TO_2000),
            ("DE_2001_A_2010", ConstructionPeriod.FROM_2001_TO_2010),
            ("A_COMPTER_DE_2011", ConstructionPeriod.FROM_2011),
            ("avant 1949", ConstructionPeriod.BEFORE_1949),
            ("de 1975 a 1993", ConstructionPeriod.FROM_1975_TO_1993),
            ("1994-2000", ConstructionPeriod.FROM_1994_TO_2000),
            ("2011-onward", ConstructionPeriod.FROM_2011),
        ],
    )
    def test_known_labels(self, label: str, expected: ConstructionPeriod) -> None:
        assert parse_period(label) is expected

    @pytest.mark.parametrize("label", [None, "", "NON_CONNUE", "non renseigné", "inconnue"])
    def test_unknown_labels(self, label: str | None) -> None:
        assert parse_period(label) is None


class TestParseSyndicType:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("professionnel", SyndicType.PROFESSIONAL),
            ("Professionnel ", SyndicType.PROFESSIONAL),
            ("bénévole", SyndicType.VOLUNTEER),
            ("BENEVOLE", SyndicType.VOLUNTEER),
            ("non connu", SyndicType.OTHER),
            ("", None),
            (None, None),
        ],
    )
    def test_labels(self, label: str | None, expected: SyndicType | None) -> None:
        assert parse_syndic_type(label) is expected


class TestParseEnergyClass:
    def test_letter(self) -> None:
        assert parse_energy_class(" b ") is EnergyClass.B

    def test_out_of_range_is_unknown(self) -> None:
        assert parse_energy_class("H") is None
        assert parse_energy_class("N/A") is None


# ---------------------------------------------------------------------------
# Full rows
# ---------------------------------------------------------------------------


class TestSnapshotFromRegistry:
    def test_full_record(self) -> None:
        snap = snapshot_from_registry(_record())
        assert snap.entity_id == "AA1234567"
        assert snap.construction_period is ConstructionPeriod.FROM_1961_TO_1974
        assert snap.syndic_type is SyndicType.PROFESSIONAL
        assert snap.is_cooperative is False
        assert snap.total_lots == 24
        assert snap.works_fund_contribution == pytest.approx(1250.5)
        assert snap.in_risk_prevention_plan is False
        assert snap.energy_class is EnergyClass.E
        assert snap.has_elevator is True
        assert snap.floor_count == 6
        assert snap.market_annual_price_change_pct == pytest.approx(-2.5)
        assert snap.market_transaction_count == 14
        assert snap.registration_date == date(2017, 9, 10)
        assert snap.last_update_date == date(2024, 6, 15)

    def test_missing_columns_are_unknown(self) -> None:
        snap = snapshot_from_registry({})
        assert snap == snapshot_from_registry({"periode_construction": "NON_CONNUE"})
        assert snap.entity_id is None
        assert snap.in_risk_prevention_plan is None
        assert snap.has_caretaker is None

    def test_blank_values_are_unknown(self) -> None:
        snap = snapshot_from_registry(_record(nb_total_lots="  ", ascenseur="", fonds_travaux=None))
        assert snap.total_lots is None
        assert snap.has_elevator is None
        assert snap.works_fund_contribution is None

    @pytest.mark.parametrize(("count", "expected"), [(0, False), (1, True), ("3", True)])
    def test_risk_plan_from_count(self, count: object, expected: bool) -> None:
        snap = snapshot_from_registry(_record(copro_dans_pdp=count))
        assert snap.in_risk_prevention_plan is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("oui", True), ("NON", False), (True, True), (0, False), ("1", True)],
    )
    def test_yes_no_columns(self, value: object, expected: bool) -> None:
        snap = snapshot_from_registry(_record(gardien=value))
        assert snap.has_caretaker is expected

    def test_unparseable_boolean_raises(self) -> None:
        with pytest.raises(RegistryParseError) as exc_info:
            snapshot_from_registry(_record(mandat_ad_hoc="peut-être"))
        assert exc_info.value.column == "mandat_ad_hoc"
        assert "mandat_ad_hoc" in str(exc_info.value)

    def test_unparseable_number_raises(self) -> None:
        with pytest.raises(RegistryParseError, match="nb_total_lots"):
            snapshot_from_registry(_record(nb_total_lots="beaucoup"))

    def test_fractional_lot_count_raises(self) -> None:
        with pytest.raises(RegistryParseError, match="nb_total_lots"):
            snapshot_from_registry(_record(nb_total_lots="12,5"))

    def test_unparseable_date_raises(self) -> None:
        with pytest.raises(RegistryParseError, match="date_immatriculation"):
            snapshot_from_registry(_record(date_immatriculation="10/09/2017"))

    def test_datetime_string_is_truncated_to_date(self) -> None:
        snap = snapshot_from_registry(_record(date_reglement_copropriete="1985-03-01T00:00:00Z"))
        assert snap.bylaw_date == date(1985, 3, 1)

    def test_parse_error_is_a_coproscope_error(self) -> None:
        assert issubclass(RegistryParseError, CoproscopeError)

    def test_negative_lot_count_fails_validation(self) -> None:
        with pytest.raises(ValidationError):
            snapshot_from_registry(_record(nb_total_lots=-3))

    @pytest.mark.parametrize("value", ["nan", "inf", float("nan")])
    def test_non_finite_evolution_fails_validation(self, value: object) -> None:
        with pytest.raises(ValidationError):
            snapshot_from_registry(_record(marche_evolution=value))
