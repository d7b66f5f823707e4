from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ChartKind(str, Enum):
    """
    Selects the grouping strategy used by the renderer.
    """
    BIRTH = "birth"
    DIVISIONAL = "divisional"


# ─────────────────────────────────────────────
# Bodies
# ─────────────────────────────────────────────

class CelestialBody(BaseModel):
    """
    A body placed in a zodiac sign (birth chart).
    """
    model_config = ConfigDict(frozen=True)

    name: str
    sign: int = Field(..., ge=1, le=12)
    degree: float
    retrograde: bool = False
    full_degree: Optional[float] = None


class DivisionalBody(BaseModel):
    """
    A body placed directly in a house (Navamsha chart).
    """
    model_config = ConfigDict(frozen=True)

    name: str
    house: int
    retrograde: bool = False
    sign: Optional[int] = None


# ─────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────

class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class BoundingBox(BaseModel):
    """
    Axis-aligned box: min corner plus width/height.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2,
        )


# ─────────────────────────────────────────────
# Render output
# ─────────────────────────────────────────────

class LabelDescriptor(BaseModel):
    """
    A single positioned text label inside a house cell.
    """
    model_config = ConfigDict(frozen=True)

    house: int
    x: float
    y: float
    text: str
    is_ascendant: bool = False
    is_retrograde: bool = False
    is_placeholder: bool = False


class ChartRender(BaseModel):
    """
    Complete label set for one chart.
    """
    kind: ChartKind
    labels: List[LabelDescriptor] = Field(default_factory=list)


class PlanetSummary(BaseModel):
    """
    Tabular view of one birth-chart body.
    """
    name: str
    glyph: str
    sign: Union[int, float]
    sign_name: str
    degree: float
    degree_text: str
    retrograde: bool = False


class ChartBundle(BaseModel):
    """
    Both charts plus the planet table for one set of birth details.
    """
    planets: List[PlanetSummary] = Field(default_factory=list)
    birth_chart: ChartRender
    navamsha_chart: ChartRender
