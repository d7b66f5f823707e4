from dataclasses import dataclass
from typing import Dict, Tuple

from kundali_chart.domain.chart.schemas import BoundingBox, Point


Vertex = Tuple[float, float]

HOUSE_COUNT = 12

# North-Indian diamond grid. House 1 is the top diamond, numbering runs
# anti-clockwise around the chart.
HOUSE_POLYGONS: Tuple[Tuple[Vertex, ...], ...] = (
    ((400, 100), (250, 250), (400, 400), (550, 250)),
    ((100, 100), (250, 250), (400, 100)),
    ((100, 400), (250, 250), (100, 100)),
    ((250, 250), (100, 400), (250, 550), (400, 400)),
    ((100, 400), (250, 550), (100, 700)),
    ((100, 700), (250, 550), (400, 700)),
    ((400, 400), (250, 550), (400, 700), (550, 550)),
    ((400, 700), (550, 550), (700, 700)),
    ((700, 400), (550, 550), (700, 700)),
    ((550, 250), (700, 400), (550, 550), (400, 400)),
    ((700, 100), (550, 250), (700, 400)),
    ((400, 100), (550, 250), (700, 100)),
)


@dataclass(frozen=True)
class HouseCell:
    """
    One fixed polygonal region of the chart.
    """

    index: int
    points: Tuple[Vertex, ...]

    @property
    def bounding_box(self) -> BoundingBox:
        xs = [x for x, _ in self.points]
        ys = [y for _, y in self.points]
        return BoundingBox(
            x=min(xs),
            y=min(ys),
            width=max(xs) - min(xs),
            height=max(ys) - min(ys),
        )

    @property
    def center(self) -> Point:
        return self.bounding_box.center


@dataclass(frozen=True)
class ChartGeometry:
    """
    Read-only set of the 12 house cells shared by every chart kind.
    """

    cells: Tuple[HouseCell, ...]

    def __post_init__(self):
        indices = sorted(cell.index for cell in self.cells)
        if indices != list(range(1, HOUSE_COUNT + 1)):
            raise ValueError(f"Geometry must define houses 1-{HOUSE_COUNT}, got {indices}")

    @classmethod
    def from_polygons(cls, polygons) -> "ChartGeometry":
        return cls(
            cells=tuple(
                HouseCell(index=i, points=tuple(tuple(p) for p in points))
                for i, points in enumerate(polygons, start=1)
            )
        )

    def cell(self, index: int) -> HouseCell:
        for cell in self.cells:
            if cell.index == index:
                return cell
        raise ValueError(f"Unknown house index: {index}")

    def ordered_cells(self) -> Tuple[HouseCell, ...]:
        return tuple(sorted(self.cells, key=lambda cell: cell.index))

    def bounding_boxes(self) -> Dict[int, BoundingBox]:
        return {cell.index: cell.bounding_box for cell in self.cells}


DEFAULT_GEOMETRY = ChartGeometry.from_polygons(HOUSE_POLYGONS)
