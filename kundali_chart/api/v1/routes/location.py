from fastapi import APIRouter, Query, HTTPException
from typing import List

from kundali_chart.domain.chart.errors import LocationLookupError
from kundali_chart.services.location_service import Location, LocationService

router = APIRouter()


@router.get(
    "/locations/search",
    response_model=List[Location],
    summary="Search for places and get their coordinates"
)
async def search_locations(
    q: str = Query(..., min_length=2, description="Place name (e.g., 'pune', 'new york')")
):
    """
    Search for a place by name. Returns matching places with their
    display name, latitude and longitude for the birth details form.
    """
    try:
        return await LocationService().search(q)
    except LocationLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))
