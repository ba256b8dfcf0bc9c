import os
from pathlib import Path

GEOCODING_ENDPOINT = os.getenv("MAUSAM_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_ENDPOINT = os.getenv("MAUSAM_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

SUPPORTED_LANGUAGES = ("hi", "en")
DEFAULT_LANGUAGE = "hi"
LANGUAGE = os.getenv("MAUSAM_LANGUAGE", DEFAULT_LANGUAGE).strip().lower()
if LANGUAGE not in SUPPORTED_LANGUAGES:
    LANGUAGE = DEFAULT_LANGUAGE

REQUEST_TIMEOUT_SECONDS = float(os.getenv("MAUSAM_REQUEST_TIMEOUT", "10"))
RAIN_WINDOW_HOURS = int(os.getenv("MAUSAM_RAIN_WINDOW_HOURS", "6"))
DEFAULT_TIMEZONE = "UTC"

LOG_PATH = Path(os.getenv("MAUSAM_LOG_PATH", "logs/mausam.log"))


def resolve_language(language: str | None) -> str:
    if not language:
        return LANGUAGE
    language = language.strip().lower()
    return language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
