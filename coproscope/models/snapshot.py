"""Input models: the condominium snapshot and its historical rows."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coproscope.models.enums import ConstructionPeriod, EnergyClass, SyndicType


def _upper_energy_class(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip().upper()
        return v or None
    return v


class EntitySnapshot(BaseModel):
    """Read-only, fully resolved record of one condominium.

    Every field is optional: ``None`` means the source registry has no value.
    Risk flags are tri-state so that "no data" is never confused with
    "confirmed absent".
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    entity_id: str | None = None

    # Construction
    construction_period: ConstructionPeriod | None = None

    # Governance
    syndic_type: SyndicType | None = None
    is_cooperative: bool | None = None
    total_lots: int | None = Field(default=None, ge=0)
    works_fund_contribution: float | None = None

    # Risk flags
    in_risk_prevention_plan: bool | None = None
    provisional_administration: bool | None = None
    unsanitary_procedure: bool | None = None
    common_equipment_procedure: bool | None = None
    ordinary_peril_order: bool | None = None
    imminent_peril_order: bool | None = None
    ad_hoc_mandate: bool | None = None

    # Energy
    energy_class: EnergyClass | None = None
    collective_heating_known: bool | None = None

    # Technical
    has_elevator: bool | None = None
    floor_count: int | None = Field(default=None, ge=0)
    has_caretaker: bool | None = None

    # Market
    market_annual_price_change_pct: float | None = None
    market_transaction_count: int | None = Field(default=None, ge=0)

    # Registry dates
    bylaw_date: date | None = None
    registration_date: date | None = None
    last_update_date: date | None = None

    @field_validator("energy_class", mode="before")
    @classmethod
    def normalize_energy_class(cls, v: Any) -> Any:
        return _upper_energy_class(v)


class DiagnosticRecord(BaseModel):
    """One energy-performance diagnostic near or inside the building."""

    model_config = ConfigDict(frozen=True)

    diagnosed_on: date | None = None
    energy_class: EnergyClass | None = None

    @field_validator("energy_class", mode="before")
    @classmethod
    def normalize_energy_class(cls, v: Any) -> Any:
        return _upper_energy_class(v)


class TransactionRecord(BaseModel):
    """One recorded sale near the building."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    sold_on: date
    area: float | None = Field(default=None, ge=0)
    price: float = Field(ge=0)
    price_per_area: float | None = Field(default=None, ge=0)

    @property
    def effective_price_per_area(self) -> float | None:
        """Recorded price per m², or price / area when only those are known."""
        if self.price_per_area is not None:
            return self.price_per_area
        if self.area:
            return self.price / self.area
        return None
