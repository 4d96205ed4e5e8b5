"""Score output model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from coproscope.models.enums import ScoreBand


class ScoreResult(BaseModel):
    """Five bounded sub-scores, the normalized global score and confidence."""

    model_config = ConfigDict(frozen=True)

    global_score: int = Field(ge=0, le=100)
    technical: int = Field(ge=0, le=25)
    risk: int = Field(ge=0, le=30)
    governance: int = Field(ge=0, le=25)
    energy: int = Field(ge=0, le=20)
    market: int = Field(ge=0, le=20)
    confidence: int = Field(ge=0, le=100)

    @property
    def band(self) -> ScoreBand:
        from coproscope.neighbourhood import score_band

        return score_band(self.global_score)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption."""
        return {
            "global_score": self.global_score,
            "band": self.band.value,
            "confidence_formatted": f"{self.confidence} %",
            "dimensions": [
                {"name": "technical", "score": self.technical, "max": 25},
                {"name": "risk", "score": self.risk, "max": 30},
                {"name": "governance", "score": self.governance, "max": 25},
                {"name": "energy", "score": self.energy, "max": 20},
                {"name": "market", "score": self.market, "max": 20},
            ],
        }
