from fastapi import APIRouter

from kundali_chart.api.v1.routes.health import router as health_router
from kundali_chart.api.v1.routes.chart import router as chart_router
from kundali_chart.api.v1.routes.location import router as location_router

api_router = APIRouter()

# ─────────────────────────────────────────────
# Public Routes
# ─────────────────────────────────────────────

api_router.include_router(
    health_router,
    tags=["Health"],
)

api_router.include_router(
    chart_router,
    tags=["Charts"],
)

api_router.include_router(
    location_router,
    tags=["Locations"],
)
