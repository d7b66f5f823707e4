import math
from typing import List, Sequence, Set

from kundali_chart.domain.chart.grouping import ASCENDANT
from kundali_chart.domain.chart.schemas import (
    BoundingBox,
    CelestialBody,
    DivisionalBody,
    LabelDescriptor,
)


BIRTH_ROW_HEIGHT = 22
DIVISIONAL_ROW_HEIGHT = 18

PLANET_SYMBOLS = {
    "Ascendant": "As",
    "Sun": "Su",
    "Moon": "Mo",
    "Mars": "Ma",
    "Mercury": "Me",
    "Jupiter": "Ju",
    "Venus": "Ve",
    "Saturn": "Sa",
    "Rahu": "Ra",
    "Ketu": "Ke",
    "Uranus": "Ur",
    "Neptune": "Ne",
    "Pluto": "Pl",
}


def symbol_for(name: str) -> str:
    """
    Two-letter chart symbol; unknown names use their first two characters.
    """
    return PLANET_SYMBOLS.get(name) or name[:2]


def round_half_away(value: float) -> int:
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def row_offsets(box: BoundingBox, count: int, row_height: float) -> List[float]:
    """
    Y coordinates for `count` rows centred vertically in the box.
    """
    start = box.center.y - ((count - 1) * row_height) / 2
    return [start + k * row_height for k in range(count)]


def placeholder_label(house: int, box: BoundingBox, text: str) -> LabelDescriptor:
    center = box.center
    return LabelDescriptor(
        house=house,
        x=center.x,
        y=center.y,
        text=text,
        is_placeholder=True,
    )


def birth_labels(
    house: int,
    box: BoundingBox,
    occupants: Sequence[CelestialBody],
) -> List[LabelDescriptor]:
    """
    Stack birth-chart labels in a house.

    The sign suffix is printed only on the first body of each sign.
    """
    labels: List[LabelDescriptor] = []
    seen_signs: Set[int] = set()
    x = box.center.x

    for body, y in zip(occupants, row_offsets(box, len(occupants), BIRTH_ROW_HEIGHT)):
        text = f"{symbol_for(body.name)} {round_half_away(body.degree)}°"
        if body.sign not in seen_signs:
            text = f"{text} ({body.sign})"
            seen_signs.add(body.sign)

        labels.append(
            LabelDescriptor(
                house=house,
                x=x,
                y=y,
                text=text,
                is_ascendant=body.name == ASCENDANT,
                is_retrograde=body.retrograde,
            )
        )

    return labels


def divisional_labels(
    house: int,
    box: BoundingBox,
    occupants: Sequence[DivisionalBody],
) -> List[LabelDescriptor]:
    x = box.center.x
    return [
        LabelDescriptor(
            house=house,
            x=x,
            y=y,
            text=symbol_for(body.name),
            is_ascendant=body.name == ASCENDANT,
            is_retrograde=body.retrograde,
        )
        for body, y in zip(occupants, row_offsets(box, len(occupants), DIVISIONAL_ROW_HEIGHT))
    ]
