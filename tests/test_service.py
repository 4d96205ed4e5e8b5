"""Tests for the analysis service."""

from __future__ import annotations

import json
import logging
from datetime import date

import pytest

from coproscope.models.enums import Reliability, SyndicType
from coproscope.models.snapshot import DiagnosticRecord, EntitySnapshot, TransactionRecord
from coproscope.renovation import estimate_renovation
from coproscope.scoring import compute_score
from coproscope.services.analysis import AnalysisService, CondoAnalysis
from coproscope.timeline import build_timeline


def _snapshot() -> EntitySnapshot:
    return EntitySnapshot(
        entity_id="AB1234567",
        construction_period="before1949",
        syndic_type=SyndicType.PROFESSIONAL,
        total_lots=20,
        energy_class="F",
        in_risk_prevention_plan=True,
        last_update_date=date(2024, 6, 15),
    )


class TestAnalysisService:
    def test_matches_the_individual_computations(self) -> None:
        snap = _snapshot()
        txs = [TransactionRecord(sold_on=date(2023, 1, 10), area=45.0, price=225_000.0)]
        diagnostics = [DiagnosticRecord(diagnosed_on=date(2021, 4, 2), energy_class="F")]

        analysis = AnalysisService().analyze(
            snap, txs, diagnostics, as_of=date(2026, 1, 1),
        )

        assert isinstance(analysis, CondoAnalysis)
        assert analysis.score == compute_score(snap)
        assert analysis.renovation == estimate_renovation(snap)
        assert analysis.timeline == build_timeline(snap, txs, diagnostics, as_of=date(2026, 1, 1))
        assert set(analysis.explanations) == {
            "technical", "risk", "governance", "energy", "market",
        }
        assert analysis.processing_time_seconds >= 0

    def test_empty_snapshot(self) -> None:
        analysis = AnalysisService().analyze(EntitySnapshot())
        assert analysis.timeline == []
        assert analysis.renovation.items == ()
        assert analysis.renovation.reliability == Reliability.LOW

    def test_logs_one_summary_line(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="coproscope.services.analysis"):
            AnalysisService().analyze(_snapshot())
        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 1
        assert messages[0].startswith("Analyzed condominium AB1234567: score")

    def test_to_dict_is_json_serializable(self) -> None:
        analysis = AnalysisService().analyze(_snapshot())
        payload = analysis.to_dict()
        assert set(payload) == {
            "score",
            "score_summary",
            "renovation",
            "renovation_summary",
            "timeline",
            "explanations",
            "processing_time_seconds",
        }
        assert payload["renovation"]["reliability"] == "high"
        assert payload["timeline"][0]["category"] == "administrative"
        json.dumps(payload)
