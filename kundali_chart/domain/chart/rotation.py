from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from kundali_chart.domain.chart.geometry import HOUSE_COUNT


@dataclass(frozen=True)
class SignToHouseMap:
    """
    Rotation of the zodiac onto the fixed house cells.

    House 1 always holds the ascendant's sign; the remaining signs
    follow in zodiac order around the chart.
    """

    ascendant_sign: int
    sign_to_house: Mapping[int, int]
    house_to_sign: Mapping[int, int]

    def house_for(self, sign: int) -> Optional[int]:
        return self.sign_to_house.get(sign)

    def sign_for(self, house: int) -> int:
        if house not in self.house_to_sign:
            raise ValueError(f"Unknown house index: {house}")
        return self.house_to_sign[house]


def resolve(ascendant_sign: int) -> SignToHouseMap:
    """
    Build the sign -> house rotation for the given ascendant sign.
    """
    if isinstance(ascendant_sign, bool) or not isinstance(ascendant_sign, int):
        raise ValueError(f"Invalid ascendant sign: {ascendant_sign!r}")
    if not 1 <= ascendant_sign <= HOUSE_COUNT:
        raise ValueError(f"Invalid ascendant sign: {ascendant_sign}")

    sign_to_house = {}
    house_to_sign = {}

    for i in range(HOUSE_COUNT):
        sign = (ascendant_sign - 1 + i) % HOUSE_COUNT + 1
        house = i + 1
        sign_to_house[sign] = house
        house_to_sign[house] = sign

    return SignToHouseMap(
        ascendant_sign=ascendant_sign,
        sign_to_house=MappingProxyType(sign_to_house),
        house_to_sign=MappingProxyType(house_to_sign),
    )
