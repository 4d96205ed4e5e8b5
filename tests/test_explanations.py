"""Tests for per-dimension score explanations."""

from __future__ import annotations

from coproscope.explanations import (
    explain_energy,
    explain_governance,
    explain_market,
    explain_risk,
    explain_score,
    explain_technical,
)
from coproscope.models.enums import SyndicType
from coproscope.models.snapshot import EntitySnapshot


class TestExplainScore:
    def test_one_text_per_dimension(self) -> None:
        explanations = explain_score(EntitySnapshot())
        assert list(explanations) == ["technical", "risk", "governance", "energy", "market"]
        assert all(isinstance(text, str) and text for text in explanations.values())


class TestTechnical:
    def test_unknown_period(self) -> None:
        assert "not recorded" in explain_technical(EntitySnapshot())

    def test_period_label_is_quoted(self) -> None:
        text = explain_technical(EntitySnapshot(construction_period="1961-1974"))
        assert "between 1961 and 1974" in text
        assert "thermal regulations" in text

    def test_recent_building(self) -> None:
        text = explain_technical(EntitySnapshot(construction_period="2011-onward"))
        assert "modern thermal standards" in text


class TestRisk:
    def test_no_procedure(self) -> None:
        assert explain_risk(EntitySnapshot()).startswith("No particular risk")

    def test_false_flags_are_not_mentioned(self) -> None:
        text = explain_risk(EntitySnapshot(in_risk_prevention_plan=False))
        assert text.startswith("No particular risk")

    def test_each_open_procedure_is_mentioned(self) -> None:
        text = explain_risk(
            EntitySnapshot(in_risk_prevention_plan=True, ad_hoc_mandate=True),
        )
        assert "risk-prevention plan" in text
        assert "ad-hoc mandate" in text
        assert "No particular risk" not in text


class TestGovernance:
    def test_unknown_syndic(self) -> None:
        assert "not recorded" in explain_governance(EntitySnapshot())

    def test_professional_cooperative_large(self) -> None:
        text = explain_governance(
            EntitySnapshot(
                syndic_type=SyndicType.PROFESSIONAL, is_cooperative=True, total_lots=120,
            ),
        )
        assert "professional syndic" in text
        assert "cooperative" in text
        assert "large condominium" in text

    def test_small_condominium(self) -> None:
        text = explain_governance(
            EntitySnapshot(syndic_type=SyndicType.VOLUNTEER, total_lots=6),
        )
        assert "volunteer syndic" in text
        assert "only 6 lots" in text


class TestEnergy:
    def test_poor_class(self) -> None:
        text = explain_energy(EntitySnapshot(energy_class="F"))
        assert "class is F" in text
        assert "energy intensive" in text

    def test_good_class(self) -> None:
        assert "excellent" in explain_energy(EntitySnapshot(energy_class="A"))

    def test_estimated_from_period(self) -> None:
        text = explain_energy(EntitySnapshot(construction_period="before1949"))
        assert "No collective energy diagnostic" in text
        assert "before 1949" in text

    def test_nothing_known(self) -> None:
        assert "default value" in explain_energy(EntitySnapshot())


class TestMarket:
    def test_insufficient_data(self) -> None:
        text = explain_market(
            EntitySnapshot(market_annual_price_change_pct=4.0, market_transaction_count=2),
        )
        assert "kept neutral" in text

    def test_rising_market_with_volume(self) -> None:
        text = explain_market(
            EntitySnapshot(market_annual_price_change_pct=6.0, market_transaction_count=25),
        )
        assert "+6.0 %" in text
        assert "rising strongly" in text
        assert "25 recent sales" in text

    def test_falling_market(self) -> None:
        text = explain_market(
            EntitySnapshot(market_annual_price_change_pct=-5.0, market_transaction_count=8),
        )
        assert "-5.0 %" in text
        assert "falling significantly" in text
        assert "8 sales were recorded" in text
