from typing import Any, Iterable, List, Mapping, Optional, Union

from kundali_chart.domain.chart.converters import BirthRecord, as_number, is_retrograde
from kundali_chart.domain.chart.schemas import CelestialBody, PlanetSummary


# Zodiac order
SIGNS = [
    "Aries", "Taurus", "Gemini", "Cancer",
    "Leo", "Virgo", "Libra", "Scorpio",
    "Sagittarius", "Capricorn", "Aquarius", "Pisces",
]

PLANET_GLYPHS = {
    "Sun": "☉",
    "Moon": "☽",
    "Mars": "♂",
    "Mercury": "☿",
    "Jupiter": "♃",
    "Venus": "♀",
    "Saturn": "♄",
    "Rahu": "☊",
    "Ketu": "☋",
    "Ascendant": "⇧",
    "Uranus": "♅",
    "Neptune": "♆",
    "Pluto": "♇",
}

DEFAULT_GLYPH = "★"


def sign_name(sign: Union[int, float]) -> str:
    if float(sign).is_integer() and 1 <= sign <= len(SIGNS):
        return SIGNS[int(sign) - 1]
    return "Unknown"


def _summary_row(record: Any) -> Optional[PlanetSummary]:
    if isinstance(record, CelestialBody):
        name, sign, degree, retrograde = record.name, record.sign, record.degree, record.retrograde
    elif isinstance(record, Mapping):
        name = record.get("name")
        sign = as_number(record.get("current_sign"))
        degree = as_number(record.get("normDegree"))
        retrograde = is_retrograde(record.get("isRetro"))
    else:
        return None

    if not isinstance(name, str) or not name or sign is None or degree is None:
        return None

    return PlanetSummary(
        name=name,
        glyph=PLANET_GLYPHS.get(name, DEFAULT_GLYPH),
        sign=int(sign) if float(sign).is_integer() else sign,
        sign_name=sign_name(sign),
        degree=degree,
        degree_text=f"{degree:.1f}°",
        retrograde=retrograde,
    )


def summarize_planets(records: Iterable[BirthRecord]) -> List[PlanetSummary]:
    """
    Planet table rows, in input order.

    Unlike chart ingestion this keeps every record with a name and numeric
    sign and degree: signs outside 1-12 read "Unknown" and repeated names
    are listed again.
    """
    rows = []
    for record in records:
        row = _summary_row(record)
        if row is not None:
            rows.append(row)
    return rows
