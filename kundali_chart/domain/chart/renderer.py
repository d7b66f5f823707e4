import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Type

from kundali_chart.domain.chart.converters import (
    parse_birth_bodies,
    parse_divisional_bodies,
)
from kundali_chart.domain.chart.geometry import DEFAULT_GEOMETRY, ChartGeometry
from kundali_chart.domain.chart.grouping import group_by_house_number, group_by_sign
from kundali_chart.domain.chart.layout import (
    birth_labels,
    divisional_labels,
    placeholder_label,
)
from kundali_chart.domain.chart.schemas import ChartKind, ChartRender, LabelDescriptor

logger = logging.getLogger(__name__)


class BaseChartRenderer(ABC):
    """
    Abstract base class for chart renderers.

    Each render call:
    - Drops the labels from the previous call
    - Filters the raw body list
    - Groups bodies into the 12 house cells
    - Lays out one label set per cell, house 1 to 12
    """

    kind: ChartKind

    def __init__(self, geometry: ChartGeometry = DEFAULT_GEOMETRY):
        self.geometry = geometry
        self._labels: List[LabelDescriptor] = []

    @property
    def labels(self) -> List[LabelDescriptor]:
        """
        Labels produced by the most recent render call.
        """
        return list(self._labels)

    def render(self, records: Iterable) -> List[LabelDescriptor]:
        """
        Replace the current label set with one built from `records`.

        Whole-chart errors propagate after the previous labels have
        been discarded, so a failed render leaves no labels behind.
        """
        self._labels = []
        labels = self._build(list(records))
        self._labels = labels
        logger.debug(f"Rendered {len(labels)} labels for {self.kind.value} chart")
        return list(labels)

    def render_chart(self, records: Iterable) -> ChartRender:
        return ChartRender(kind=self.kind, labels=self.render(records))

    @abstractmethod
    def _build(self, records: List) -> List[LabelDescriptor]:
        raise NotImplementedError


class BirthChartRenderer(BaseChartRenderer):
    """
    Places bodies by sign, rotated so the ascendant's sign is house 1.
    """

    kind = ChartKind.BIRTH

    def _build(self, records: List) -> List[LabelDescriptor]:
        bodies = parse_birth_bodies(records)
        sign_map, houses = group_by_sign(bodies)

        labels: List[LabelDescriptor] = []
        for cell in self.geometry.ordered_cells():
            box = cell.bounding_box
            occupants = houses.get(cell.index)
            if occupants:
                labels.extend(birth_labels(cell.index, box, occupants))
            else:
                # bare sign number, no parentheses; is_placeholder carries the styling
                labels.append(
                    placeholder_label(cell.index, box, str(sign_map.sign_for(cell.index)))
                )
        return labels


class DivisionalChartRenderer(BaseChartRenderer):
    """
    Places bodies by their precomputed Navamsha house number.
    """

    kind = ChartKind.DIVISIONAL

    def _build(self, records: List) -> List[LabelDescriptor]:
        houses = group_by_house_number(parse_divisional_bodies(records))

        labels: List[LabelDescriptor] = []
        for cell in self.geometry.ordered_cells():
            box = cell.bounding_box
            occupants = houses.get(cell.index)
            if occupants:
                labels.extend(divisional_labels(cell.index, box, occupants))
            else:
                labels.append(placeholder_label(cell.index, box, str(cell.index)))
        return labels


RENDERERS: Dict[ChartKind, Type[BaseChartRenderer]] = {
    ChartKind.BIRTH: BirthChartRenderer,
    ChartKind.DIVISIONAL: DivisionalChartRenderer,
}


def get_renderer(
    kind: ChartKind,
    geometry: ChartGeometry = DEFAULT_GEOMETRY,
) -> BaseChartRenderer:
    return RENDERERS[ChartKind(kind)](geometry)


def render_chart(
    records: Iterable,
    kind: ChartKind,
    geometry: ChartGeometry = DEFAULT_GEOMETRY,
) -> ChartRender:
    """
    Pure entry point: (bodies, kind, geometry) -> label set.
    """
    return get_renderer(kind, geometry).render_chart(records)
