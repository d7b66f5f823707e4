from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "kundali-chart"
    ENV: str = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ─── Astrology API ────────────────────
    ASTRO_API_BASE_URL: str = "https://json.freeastrologyapi.com"
    ASTRO_API_KEY: Optional[str] = None
    ASTRO_API_TIMEOUT: float = 15.0
    ASTRO_OBSERVATION_POINT: str = "topocentric"
    ASTRO_AYANAMSHA: str = "lahiri"

    # ─── Geocoding ────────────────────────
    GEOCODER_URL: str = "https://nominatim.openstreetmap.org/search"
    GEOCODER_USER_AGENT: str = "kundali-chart/0.1"
    GEOCODER_RESULT_LIMIT: int = 5
    GEOCODER_TIMEOUT: float = 10.0


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
