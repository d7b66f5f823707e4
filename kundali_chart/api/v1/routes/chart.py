from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from kundali_chart.api.dependencies import get_chart_service
from kundali_chart.domain.chart.errors import AstrologyApiError, MissingAscendantError
from kundali_chart.domain.chart.schemas import ChartBundle, ChartKind, ChartRender
from kundali_chart.services.astrology_client import BirthDetails
from kundali_chart.services.chart_service import ChartService


router = APIRouter()


# ─────────────────────────────────────────────
# Request Schema
# ─────────────────────────────────────────────

class ChartRenderRequest(BaseModel):
    kind: ChartKind = Field(..., example="birth")
    # raw API records; invalid entries are dropped during rendering
    bodies: List[Dict[str, Any]] = Field(default_factory=list)
    title: Optional[str] = None


# ─────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────

@router.post(
    "/charts",
    response_model=ChartBundle,
    summary="Fetch positions and render birth and Navamsha charts",
)
async def create_charts(
    payload: BirthDetails,
    service: ChartService = Depends(get_chart_service),
):
    try:
        return await service.generate(payload)
    except MissingAscendantError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except AstrologyApiError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post(
    "/charts/render",
    response_model=ChartRender,
    summary="Lay out labels for a supplied body list",
)
async def render_chart_labels(
    payload: ChartRenderRequest,
    service: ChartService = Depends(get_chart_service),
):
    try:
        return service.render(payload.kind, payload.bodies)
    except MissingAscendantError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post(
    "/charts/render.svg",
    summary="Draw a supplied body list as SVG",
    response_class=Response,
)
async def render_chart_svg(
    payload: ChartRenderRequest,
    service: ChartService = Depends(get_chart_service),
):
    try:
        svg = service.render_svg(payload.kind, payload.bodies, title=payload.title)
    except MissingAscendantError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return Response(content=svg, media_type="image/svg+xml")
