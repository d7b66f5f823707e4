"""
Chart Module

House assignment and label layout for the birth and Navamsha charts.
"""

from kundali_chart.domain.chart.errors import (
    ChartError,
    InvalidBodyRecordError,
    MissingAscendantError,
)
from kundali_chart.domain.chart.geometry import DEFAULT_GEOMETRY, ChartGeometry, HouseCell
from kundali_chart.domain.chart.renderer import (
    BirthChartRenderer,
    DivisionalChartRenderer,
    get_renderer,
    render_chart,
)
from kundali_chart.domain.chart.rotation import SignToHouseMap, resolve
from kundali_chart.domain.chart.schemas import ChartKind, ChartRender, LabelDescriptor

__all__ = [
    "ChartError",
    "InvalidBodyRecordError",
    "MissingAscendantError",
    "DEFAULT_GEOMETRY",
    "ChartGeometry",
    "HouseCell",
    "BirthChartRenderer",
    "DivisionalChartRenderer",
    "get_renderer",
    "render_chart",
    "SignToHouseMap",
    "resolve",
    "ChartKind",
    "ChartRender",
    "LabelDescriptor",
]
