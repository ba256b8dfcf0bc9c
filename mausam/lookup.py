from datetime import datetime

from mausam.advice import build_advice, local_month
from mausam.config import RAIN_WINDOW_HOURS, resolve_language
from mausam.forecast import fetch_forecast
from mausam.formatting import format_reading
from mausam.geocoding import fetch_location
from mausam.logs import log
from mausam.messages import message


def build_card(forecast: dict, language: str, now: datetime | None = None) -> dict:
    month = local_month(forecast.get("timezone"), now=now)
    return {
        "temperature": format_reading(forecast.get("temperature"), "°C"),
        "humidity": format_reading(forecast.get("humidity"), "%"),
        "rain_chance": format_reading(forecast.get("rain_chance"), "%"),
        "advice": build_advice(
            forecast.get("temperature"),
            forecast.get("humidity"),
            forecast.get("rain_chance"),
            month,
            language,
        ),
    }


def handle_submit(city: str | None, language: str | None = None, now: datetime | None = None, session=None) -> dict:
    """
    Run one form submission: geocode the city, fetch its forecast and
    build the weather card.

    Returns a dict with ``ok``, ``status`` (user-facing line), ``card``
    (None unless the lookup succeeded) and ``location``.
    """
    language = resolve_language(language)
    city = (city or "").strip()
    if not city:
        return {"ok": False, "status": message("status_empty_city", language), "card": None, "location": None}

    location, geo_status = fetch_location(city, language=language, session=session)
    if location is None:
        log(f"lookup failed for {city!r}: {geo_status}")
        return {"ok": False, "status": message("status_failure", language), "card": None, "location": None}

    forecast, fc_status = fetch_forecast(location, window_hours=RAIN_WINDOW_HOURS, now=now, session=session)
    if forecast is None:
        log(f"lookup failed for {city!r} ({location['latitude']},{location['longitude']}): {fc_status}")
        return {"ok": False, "status": message("status_failure", language), "card": None, "location": location}

    status = message("status_success", language, name=location["name"], country=location["country"])
    return {
        "ok": True,
        "status": status,
        "card": build_card(forecast, language, now=now),
        "location": location,
    }
