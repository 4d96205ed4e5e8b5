"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

# Load .env from the project root
_project_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_project_root / ".env")

from coproscope.api.deps import create_analysis_service, get_cors_origins
from coproscope.api.schemas import AnalysisRequest, RegistryAnalysisRequest  # noqa: TCH001
from coproscope.exceptions import CoproscopeError
from coproscope.models.snapshot import EntitySnapshot  # noqa: TCH001 (FastAPI resolves at runtime)
from coproscope.registry import snapshot_from_registry
from coproscope.renovation import estimate_renovation
from coproscope.scoring import compute_score
from coproscope.timeline import build_timeline

if TYPE_CHECKING:
    from coproscope.services.analysis import AnalysisService

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def create_app(*, service: AnalysisService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    service
        Optional pre-built analysis service for dependency injection
        (e.g. tests). If not provided, one is created on first use.
    """
    app = FastAPI(title="coproscope", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.service = service

    def _get_service() -> AnalysisService:
        svc: AnalysisService | None = app.state.service
        if svc is not None:
            return svc
        svc = create_analysis_service()
        app.state.service = svc
        return svc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # POST /api/score, /api/renovation, /api/timeline
    # ------------------------------------------------------------------

    @app.post("/api/score")
    def score(snapshot: EntitySnapshot) -> dict[str, Any]:
        result = compute_score(snapshot)
        return {
            "score": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    @app.post("/api/renovation")
    def renovation(snapshot: EntitySnapshot) -> dict[str, Any]:
        result = estimate_renovation(snapshot)
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    @app.post("/api/timeline")
    def timeline(request: AnalysisRequest) -> dict[str, Any]:
        events = build_timeline(
            request.snapshot,
            nearby_transactions=request.nearby_transactions,
            diagnostic_history=request.diagnostic_history,
            as_of=request.as_of,
        )
        return {"events": [event.model_dump(mode="json") for event in events]}

    # ------------------------------------------------------------------
    # POST /api/analyze
    # ------------------------------------------------------------------

    @app.post("/api/analyze")
    def analyze(request: AnalysisRequest) -> dict[str, Any]:
        result = _get_service().analyze(
            request.snapshot,
            nearby_transactions=request.nearby_transactions,
            diagnostic_history=request.diagnostic_history,
            as_of=request.as_of,
        )
        return result.to_dict()

    # ------------------------------------------------------------------
    # POST /api/registry/analyze
    # ------------------------------------------------------------------

    @app.post("/api/registry/analyze")
    def analyze_registry_record(request: RegistryAnalysisRequest) -> dict[str, Any]:
        try:
            snapshot = snapshot_from_registry(request.record)
        except CoproscopeError as exc:
            logger.warning("Rejected registry record: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ValidationError as exc:
            logger.warning("Registry record failed validation: %s", exc)
            raise HTTPException(
                status_code=422,
                detail=exc.errors(include_url=False, include_context=False),
            ) from exc

        result = _get_service().analyze(
            snapshot,
            nearby_transactions=request.nearby_transactions,
            diagnostic_history=request.diagnostic_history,
            as_of=request.as_of,
        )
        return {
            "snapshot": snapshot.model_dump(mode="json"),
            **result.to_dict(),
        }

    return app
