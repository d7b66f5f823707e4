import httpx
import logging
from typing import List, Optional

from pydantic import BaseModel

from kundali_chart.config import settings
from kundali_chart.domain.chart.errors import LocationLookupError

logger = logging.getLogger(__name__)


class Location(BaseModel):
    display_name: str
    latitude: float
    longitude: float


class LocationService:
    """
    Service for searching places using the OpenStreetMap Nominatim API.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport

    async def search(self, query: str) -> List[Location]:
        """
        Searches for places matching the query.
        """
        query = (query or "").strip()
        if len(query) < 2:
            return []

        try:
            async with httpx.AsyncClient(
                timeout=settings.GEOCODER_TIMEOUT,
                transport=self.transport,
            ) as client:
                response = await client.get(
                    settings.GEOCODER_URL,
                    params={
                        "format": "json",
                        "q": query,
                        "limit": settings.GEOCODER_RESULT_LIMIT,
                    },
                    headers={"User-Agent": settings.GEOCODER_USER_AGENT},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Location search failed for {query!r}: {e}")
            raise LocationLookupError("Failed to fetch location data") from e

        results = []
        for item in data if isinstance(data, list) else []:
            # Nominatim returns coordinates as strings
            try:
                results.append(
                    Location(
                        display_name=item["display_name"],
                        latitude=float(item["lat"]),
                        longitude=float(item["lon"]),
                    )
                )
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed location result: {item!r}")

        return results
