import logging
from typing import Dict, List, Sequence, Tuple, TypeVar

from kundali_chart.domain.chart.errors import MissingAscendantError
from kundali_chart.domain.chart.geometry import HOUSE_COUNT
from kundali_chart.domain.chart.rotation import SignToHouseMap, resolve
from kundali_chart.domain.chart.schemas import CelestialBody, DivisionalBody

logger = logging.getLogger(__name__)

ASCENDANT = "Ascendant"

Body = TypeVar("Body", CelestialBody, DivisionalBody)

# house index -> occupants in input order; a missing key is an empty house
HouseOccupancy = Dict[int, List[Body]]


def find_ascendant(bodies: Sequence[CelestialBody]) -> CelestialBody:
    for body in bodies:
        if body.name == ASCENDANT:
            return body

    logger.error("Ascendant data is missing; birth chart cannot be rendered")
    raise MissingAscendantError("Ascendant data is missing")


def group_by_sign(
    bodies: Sequence[CelestialBody],
) -> Tuple[SignToHouseMap, HouseOccupancy]:
    """
    Place birth-chart bodies into houses via the ascendant rotation.
    """
    ascendant = find_ascendant(bodies)
    sign_map = resolve(ascendant.sign)

    houses: HouseOccupancy = {}
    for body in bodies:
        house = sign_map.house_for(body.sign)
        if house is None:
            continue
        houses.setdefault(house, []).append(body)

    return sign_map, houses


def shift_house(house_number: int) -> int:
    """
    Move a Navamsha house number one cell backward (1 and below -> 12).

    The upstream house numbering is one ahead of the cell numbering
    used by the shared geometry.
    """
    adjusted = house_number - 1
    if adjusted <= 0:
        adjusted = HOUSE_COUNT
    return adjusted


def group_by_house_number(bodies: Sequence[DivisionalBody]) -> HouseOccupancy:
    """
    Place Navamsha bodies into houses by their supplied house number.
    """
    houses: HouseOccupancy = {}
    for body in bodies:
        house = shift_house(body.house)
        if house > HOUSE_COUNT:
            logger.warning(f"Skipping {body.name}: house number {body.house} has no chart cell")
            continue
        houses.setdefault(house, []).append(body)
    return houses
