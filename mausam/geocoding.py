import requests

from mausam.config import DEFAULT_TIMEZONE, GEOCODING_ENDPOINT, REQUEST_TIMEOUT_SECONDS, resolve_language


def fetch_location(city: str, language: str | None = None, session=None):
    """
    Resolve a city name to coordinates via the Open-Meteo geocoding API.

    Returns (location | None, status_message). Only the best match is used.
    """
    http = session or requests
    params = {
        "name": city,
        "count": 1,
        "language": resolve_language(language),
        "format": "json",
    }
    try:
        resp = http.get(
            GEOCODING_ENDPOINT,
            params=params,
            timeout=REQUEST_TIMEOUT_SECONDS,
            headers={"accept": "application/json"},
        )
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError):
        return None, "Geocoding request failed"

    results = payload.get("results") if isinstance(payload, dict) else None
    if not results:
        return None, "City not found"

    result = results[0]
    if not isinstance(result, dict):
        return None, "City not found"
    if result.get("latitude") is None or result.get("longitude") is None:
        return None, "Geocoding result missing coordinates"
    return {
        "latitude": result.get("latitude"),
        "longitude": result.get("longitude"),
        "name": result.get("name") or city,
        "country": result.get("country") or "",
        "timezone": result.get("timezone") or DEFAULT_TIMEZONE,
    }, "OK"
