import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field

from kundali_chart.config import settings
from kundali_chart.domain.chart.errors import AstrologyApiError

logger = logging.getLogger(__name__)


class BirthDetails(BaseModel):
    """
    Birth moment and place, in the shape the astrology API expects.
    """
    year: int = Field(..., example=1998)
    month: int = Field(..., ge=1, le=12, example=12)
    date: int = Field(..., ge=1, le=31, example=4)
    hours: int = Field(12, ge=0, le=23)
    minutes: int = Field(0, ge=0, le=59)
    seconds: int = Field(0, ge=0, le=59)
    latitude: float = Field(..., ge=-90, le=90, example=28.6139)
    longitude: float = Field(..., ge=-180, le=180, example=77.2090)
    timezone: float = Field(..., ge=-12, le=14, example=5.5)


class AstrologyApiClient:
    """
    Async client for the planetary-position API.

    This class:
    - posts birth details to the planets and Navamsha endpoints
    - unwraps the response envelope
    - returns raw body records only
    """

    PLANETS_PATH = "/planets"
    NAVAMSA_PATH = "/navamsa-chart-info"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.ASTRO_API_BASE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.ASTRO_API_KEY
        self.timeout = timeout if timeout is not None else settings.ASTRO_API_TIMEOUT
        self.transport = transport

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def fetch_planets(self, birth: BirthDetails) -> List[Dict[str, Any]]:
        """
        Birth-chart records: one per body, keyed by `name`.
        """
        payload = await self._post(self.PLANETS_PATH, birth)

        output = payload.get("output")
        if not isinstance(output, list) or not output or not isinstance(output[0], dict):
            raise AstrologyApiError("Planets response has no output")

        return [
            value
            for key, value in output[0].items()
            if key != "debug" and isinstance(value, dict) and value.get("name")
        ]

    async def fetch_navamsa(self, birth: BirthDetails) -> List[Dict[str, Any]]:
        """
        Navamsha records: one per body, carrying `house_number`.
        """
        payload = await self._post(self.NAVAMSA_PATH, birth)

        output = payload.get("output")
        if not isinstance(output, dict):
            raise AstrologyApiError("Navamsa response has no output")

        return [
            value
            for value in output.values()
            if isinstance(value, dict) and value.get("name")
        ]

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _body(self, birth: BirthDetails) -> Dict[str, Any]:
        body = birth.model_dump()
        body["settings"] = {
            "observation_point": settings.ASTRO_OBSERVATION_POINT,
            "ayanamsha": settings.ASTRO_AYANAMSHA,
        }
        return body

    async def _post(self, path: str, birth: BirthDetails) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=self._body(birth), headers=self._headers())
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Astrology API request to {path} failed: {e}")
            raise AstrologyApiError(f"Failed to fetch astrology data: {e}") from e
        except ValueError as e:
            logger.error(f"Astrology API returned invalid JSON for {path}: {e}")
            raise AstrologyApiError("Astrology API returned invalid JSON") from e

        if not isinstance(payload, dict) or payload.get("statusCode") != 200:
            status = payload.get("statusCode") if isinstance(payload, dict) else None
            logger.error(f"Astrology API {path} returned statusCode={status}")
            raise AstrologyApiError(f"Astrology API returned statusCode={status}")

        return payload
