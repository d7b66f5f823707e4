import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from kundali_chart.domain.chart.errors import InvalidBodyRecordError
from kundali_chart.domain.chart.schemas import CelestialBody, DivisionalBody

logger = logging.getLogger(__name__)


BirthRecord = Union[CelestialBody, Mapping[str, Any]]
DivisionalRecord = Union[DivisionalBody, Mapping[str, Any]]


# ─────────────────────────────────────────────
# Field helpers
# ─────────────────────────────────────────────

def as_number(value: Any) -> Optional[float]:
    """
    Return the value as float if it is a real JSON number, else None.
    Strings and booleans are not numbers here.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return float(value)


def _as_integer(value: Any, field: str) -> int:
    number = as_number(value)
    if number is None:
        raise InvalidBodyRecordError(f"{field} is not numeric: {value!r}")
    if not number.is_integer():
        raise InvalidBodyRecordError(f"{field} is not a whole number: {value!r}")
    return int(number)


def _as_index(value: Any, field: str) -> int:
    number = _as_integer(value, field)
    if not 1 <= number <= 12:
        raise InvalidBodyRecordError(f"{field} out of range 1-12: {value!r}")
    return number


def is_retrograde(value: Any) -> bool:
    """
    The API encodes the retrograde flag as the string "true"/"false".
    """
    return value is True or value == "true"


def _require_name(record: Mapping[str, Any]) -> str:
    name = record.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidBodyRecordError(f"missing name: {record!r}")
    return name


# ─────────────────────────────────────────────
# Single record
# ─────────────────────────────────────────────

def to_celestial_body(record: BirthRecord) -> CelestialBody:
    """
    Convert one birth-chart API record into a CelestialBody.
    """
    if isinstance(record, CelestialBody):
        return record
    if not isinstance(record, Mapping):
        raise InvalidBodyRecordError(f"not an object: {record!r}")

    name = _require_name(record)
    sign = _as_index(record.get("current_sign"), "current_sign")

    degree = as_number(record.get("normDegree"))
    if degree is None:
        raise InvalidBodyRecordError(f"normDegree is not numeric: {record.get('normDegree')!r}")

    return CelestialBody(
        name=name,
        sign=sign,
        degree=degree,
        retrograde=is_retrograde(record.get("isRetro")),
        full_degree=as_number(record.get("fullDegree")),
    )


def to_divisional_body(record: DivisionalRecord) -> DivisionalBody:
    """
    Convert one Navamsha API record into a DivisionalBody.
    """
    if isinstance(record, DivisionalBody):
        return record
    if not isinstance(record, Mapping):
        raise InvalidBodyRecordError(f"not an object: {record!r}")

    name = _require_name(record)
    # nominally 1-12; out-of-range values are wrapped by shift_house
    house = _as_integer(record.get("house_number"), "house_number")

    sign = record.get("current_sign")
    sign_number = as_number(sign)

    return DivisionalBody(
        name=name,
        house=house,
        retrograde=is_retrograde(record.get("isRetro")),
        sign=int(sign_number) if sign_number is not None and sign_number.is_integer() else None,
    )


# ─────────────────────────────────────────────
# Lists
# ─────────────────────────────────────────────

def parse_birth_bodies(records: Iterable[BirthRecord]) -> List[CelestialBody]:
    """
    Convert and filter a birth-chart body list.

    Invalid records are dropped. A repeated name replaces the earlier
    body but keeps its position in the list.
    """
    bodies: Dict[str, CelestialBody] = {}

    for record in records:
        try:
            body = to_celestial_body(record)
        except InvalidBodyRecordError as exc:
            logger.warning(f"Dropping invalid body record: {exc}")
            continue

        if body.name in bodies:
            logger.warning(f"Duplicate body {body.name!r}; keeping the latest record")
        bodies[body.name] = body

    return list(bodies.values())


def parse_divisional_bodies(records: Iterable[DivisionalRecord]) -> List[DivisionalBody]:
    """
    Convert and filter a Navamsha body list, preserving input order.
    """
    bodies: List[DivisionalBody] = []

    for record in records:
        try:
            bodies.append(to_divisional_body(record))
        except InvalidBodyRecordError as exc:
            logger.warning(f"Dropping invalid divisional record: {exc}")

    return bodies
