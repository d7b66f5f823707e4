import asyncio
import logging
from typing import Any, Iterable, Optional

from kundali_chart.domain.chart.geometry import DEFAULT_GEOMETRY, ChartGeometry
from kundali_chart.domain.chart.planets import summarize_planets
from kundali_chart.domain.chart.renderer import render_chart
from kundali_chart.domain.chart.schemas import ChartBundle, ChartKind, ChartRender
from kundali_chart.domain.chart.svg import render_svg
from kundali_chart.services.astrology_client import AstrologyApiClient, BirthDetails

logger = logging.getLogger(__name__)


class ChartService:
    """
    Orchestrates data fetching and chart rendering.
    """

    def __init__(
        self,
        client: Optional[AstrologyApiClient] = None,
        geometry: ChartGeometry = DEFAULT_GEOMETRY,
    ):
        self.client = client or AstrologyApiClient()
        self.geometry = geometry

    async def generate(self, birth: BirthDetails) -> ChartBundle:
        """
        Fetch both data sets, then render the birth and Navamsha charts.
        """
        planets, navamsa = await asyncio.gather(
            self.client.fetch_planets(birth),
            self.client.fetch_navamsa(birth),
        )
        logger.info(f"Fetched {len(planets)} planets and {len(navamsa)} navamsa records")

        return ChartBundle(
            planets=summarize_planets(planets),
            birth_chart=self.render(ChartKind.BIRTH, planets),
            navamsha_chart=self.render(ChartKind.DIVISIONAL, navamsa),
        )

    def render(self, kind: ChartKind, records: Iterable[Any]) -> ChartRender:
        return render_chart(records, kind, self.geometry)

    def render_svg(self, kind: ChartKind, records: Iterable[Any], title: Optional[str] = None) -> str:
        chart = self.render(kind, records)
        return render_svg(chart.labels, chart.kind, self.geometry, title=title)
