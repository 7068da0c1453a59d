import logging
import os

from fastapi import APIRouter, Depends, HTTPException, Response

from ..middleware.logging import CHART_GEOMETRY_HEADER, CHART_UNAVAILABLE_BODIES_HEADER
from ..schemas import LagnaRequest, LagnaResponse, ReadingResponse, MetaOut
from ..services import ephem
from ..services.chart import compute_chart
from ..services.errors import InvalidTimeFormat, ValidationFailed
from ..services.llm_client import LLMUnavailableError
from ..services.models import Chart
from ..services.reading import generate_reading

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lagna"])


def get_provider() -> ephem.EphemerisProvider:
    return ephem.SwissEphemerisProvider()


def _parallel() -> bool:
    return os.getenv("LAGNA_PARALLEL", "false").lower() == "true"


def _compute(req: LagnaRequest, provider: ephem.EphemerisProvider) -> Chart:
    try:
        return compute_chart(req.to_birth_input(), provider, parallel=_parallel())
    except ValidationFailed as exc:
        raise HTTPException(status_code=422, detail=exc.as_dict()) from exc
    except InvalidTimeFormat as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "InvalidTimeFormat",
                "violations": [{"field": exc.field, "code": "invalid_format", "message": str(exc)}],
            },
        ) from exc


def _mark_health(response: Response, chart: Chart) -> None:
    # Read back by the access log middleware.
    unavailable = sum(1 for b in chart.bodies if not b.available)
    response.headers[CHART_UNAVAILABLE_BODIES_HEADER] = str(unavailable)
    response.headers[CHART_GEOMETRY_HEADER] = (
        chart.angles.unavailable or ("degenerate" if chart.angles.degenerate else "ok")
    )


def _to_response(chart: Chart) -> LagnaResponse:
    meta = MetaOut(
        engine_version=ephem.ENGINE_VERSION,
        backend=ephem.backend_name(),
        warnings=chart.warnings() or None,
    )
    return LagnaResponse(**chart.to_dict(), meta=meta)


@router.post("/lagna", response_model=LagnaResponse)
def lagna(req: LagnaRequest, response: Response, provider: ephem.EphemerisProvider = Depends(get_provider)):
    chart = _compute(req, provider)
    _mark_health(response, chart)
    return _to_response(chart)


@router.post("/reading", response_model=ReadingResponse)
async def reading(req: LagnaRequest, response: Response, provider: ephem.EphemerisProvider = Depends(get_provider)):
    chart = _compute(req, provider)
    _mark_health(response, chart)
    try:
        text = await generate_reading(chart)
    except LLMUnavailableError as exc:
        logger.exception("reading_llm_unavailable")
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return ReadingResponse(reading=text, lagnaData=_to_response(chart))
