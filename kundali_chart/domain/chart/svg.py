"""
SVG drawing of a rendered chart.

The label layout is computed elsewhere; this module only turns the
house polygons and label descriptors into an SVG document.
"""

from typing import Iterable, List, Optional

import svgwrite

from kundali_chart.domain.chart.geometry import DEFAULT_GEOMETRY, ChartGeometry
from kundali_chart.domain.chart.schemas import ChartKind, LabelDescriptor


VIEWBOX = {
    ChartKind.BIRTH: (780, 800),
    ChartKind.DIVISIONAL: (780, 780),
}

# (label font size, empty house font size)
FONT_SIZES = {
    ChartKind.BIRTH: (13, 16),
    ChartKind.DIVISIONAL: (12, 14),
}

STYLE_TEMPLATE = """
.house {{ fill: #ffffff; stroke: #d4d4d8; stroke-width: 2; }}
.planet-label {{
  font-family: 'Inter', sans-serif;
  font-size: {label_size}px;
  font-weight: bold;
  fill: #0f172a;
  text-anchor: middle;
  dominant-baseline: middle;
  pointer-events: none;
}}
.planet-label.retrograde {{ fill: #dc2626; }}
.ascendant-label {{ fill: #7c3aed; }}
.empty-house-marker {{ fill: #64748b; font-size: {marker_size}px; }}
"""


def label_classes(label: LabelDescriptor) -> List[str]:
    classes = ["planet-label"]
    if label.is_placeholder:
        classes.append("empty-house-marker")
    if label.is_ascendant:
        classes.append("ascendant-label")
    if label.is_retrograde:
        classes.append("retrograde")
    return classes


def render_svg(
    labels: Iterable[LabelDescriptor],
    kind: ChartKind,
    geometry: ChartGeometry = DEFAULT_GEOMETRY,
    title: Optional[str] = None,
) -> str:
    kind = ChartKind(kind)
    width, height = VIEWBOX[kind]
    label_size, marker_size = FONT_SIZES[kind]

    dwg = svgwrite.Drawing(size=("100%", "100%"), profile="full", debug=False)
    dwg.viewbox(0, 0, width, height)
    dwg.defs.add(
        dwg.style(STYLE_TEMPLATE.format(label_size=label_size, marker_size=marker_size))
    )

    if title:
        dwg.add(dwg.text(title, insert=(width / 2, 50), class_="planet-label"))

    for cell in geometry.ordered_cells():
        dwg.add(
            dwg.polygon(
                points=list(cell.points),
                id=f"house{cell.index}",
                class_="house",
            )
        )

    for label in labels:
        dwg.add(
            dwg.text(
                label.text,
                insert=(label.x, label.y),
                class_=" ".join(label_classes(label)),
            )
        )

    return dwg.tostring()
