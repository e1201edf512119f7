"""REST API exposing the analysis normalization pipeline.

Serve it with the ``server`` extra installed::

    uvicorn padelstats.api:create_app --factory
"""

from __future__ import annotations

import logging

from fastapi import Body, FastAPI, HTTPException
from pydantic import ValidationError

from padelstats import __version__
from padelstats.api.schemas import FormatRequest, MetricErrorDetail
from padelstats.errors import MalformedMetricError, MissingRequiredContextError
from padelstats.formatting import format_response
from padelstats.ingest import RawAnalysisPayload, transform_analysis_results
from padelstats.models import AnalyticsEnvelope, FormattedResponse


logger = logging.getLogger(__name__)


def _metric_error(exc: MalformedMetricError) -> HTTPException:
    detail = MetricErrorDetail(message=str(exc), field=exc.field, value=repr(exc.value))
    return HTTPException(status_code=422, detail=detail.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(title="padelstats", version=__version__)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analysis/transform", response_model=AnalyticsEnvelope)
    async def transform(payload: RawAnalysisPayload, body_mass_kg: float | None = None):
        try:
            return transform_analysis_results(payload, body_mass_kg=body_mass_kg)
        except MalformedMetricError as exc:
            logger.warning("Rejecting job %s: %s", payload.job_id, exc)
            raise _metric_error(exc) from exc
        except ValidationError as exc:
            logger.warning("Rejecting job %s: %s", payload.job_id, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/analysis/format", response_model=FormattedResponse)
    async def format_analysis(request: FormatRequest = Body(...)):
        try:
            return format_response(
                request.payload,
                match_id=request.match_id,
                user_id=request.user_id,
                body_mass_kg=request.body_mass_kg,
            )
        except MalformedMetricError as exc:
            logger.warning("Rejecting analysis for match %s: %s", request.match_id, exc)
            raise _metric_error(exc) from exc
        except MissingRequiredContextError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app
