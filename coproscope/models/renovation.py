"""Renovation estimate output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from coproscope.models.enums import Reliability


class RenovationLineItem(BaseModel):
    """One probable works item with a cost range in euros.

    We never output a single number: every cost is a min/max range.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    min_cost: int = Field(ge=0)
    max_cost: int = Field(ge=0)

    @model_validator(mode="after")
    def min_le_max(self) -> RenovationLineItem:
        if self.min_cost > self.max_cost:
            msg = f"Must satisfy min_cost <= max_cost, got {self.min_cost} > {self.max_cost}"
            raise ValueError(msg)
        return self


class RenovationEstimate(BaseModel):
    """Ordered works items, their totals and the reliability of the inputs.

    An empty ``items`` list means no major works were identified.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[RenovationLineItem, ...] = ()
    total_min: int = 0
    total_max: int = 0
    reliability: Reliability

    @model_validator(mode="after")
    def totals_match_items(self) -> RenovationEstimate:
        expected_min = sum(item.min_cost for item in self.items)
        expected_max = sum(item.max_cost for item in self.items)
        if (self.total_min, self.total_max) != (expected_min, expected_max):
            msg = (
                f"Totals must equal the item sums, got {self.total_min}-{self.total_max}, "
                f"expected {expected_min}-{expected_max}"
            )
            raise ValueError(msg)
        return self

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with formatted amounts."""
        from coproscope.formatting import format_cost_range

        return {
            "total_formatted": format_cost_range(self.total_min, self.total_max),
            "reliability": self.reliability.value,
            "num_items": len(self.items),
            "items": [
                {
                    "name": item.name,
                    "description": item.description,
                    "cost_formatted": format_cost_range(item.min_cost, item.max_cost),
                }
                for item in self.items
            ],
        }
