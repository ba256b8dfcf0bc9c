from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd
import requests

from mausam.config import DEFAULT_TIMEZONE, FORECAST_ENDPOINT, RAIN_WINDOW_HOURS, REQUEST_TIMEOUT_SECONDS
from mausam.formatting import as_number, round_half_up

CURRENT_FIELDS = ["temperature_2m", "relative_humidity_2m", "precipitation"]
HOURLY_FIELDS = ["precipitation_probability"]


def safe_timezone(tz_name: str | None) -> str:
    if not tz_name:
        return DEFAULT_TIMEZONE
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return DEFAULT_TIMEZONE
    return tz_name


def parse_hourly(payload: dict | None, tz_name: str = DEFAULT_TIMEZONE):
    """
    Parse the Open-Meteo hourly block into a DataFrame with a tz-aware
    ``time`` column and a ``precipitation_probability`` column.

    Open-Meteo reports hourly times as local wall-clock strings
    (``2024-07-01T14:00``) in the requested timezone. On DST fall-back days
    the repeated hour is listed twice; the first occurrence is taken as
    daylight time. Entries that cannot be parsed keep ``NaT`` and are
    flagged in ``time_unparsed``. Returns None when there is no hourly data.
    """
    if not payload or not isinstance(payload, dict):
        return None
    hourly = payload.get("hourly") or {}
    times = hourly.get("time") or []
    probabilities = hourly.get("precipitation_probability") or []
    if not times or not probabilities:
        return None

    # One row per timestamp; missing probabilities count as null.
    padded = list(probabilities[: len(times)]) + [None] * max(0, len(times) - len(probabilities))
    hourly_df = pd.DataFrame({"time": list(times), "precipitation_probability": padded})
    parsed = pd.to_datetime(hourly_df["time"], errors="coerce", format="ISO8601")
    # Ambiguous wall-clock hours: first occurrence is DST, the repeat is standard time.
    first_occurrence = ~parsed.duplicated(keep="first")
    hourly_df["time_unparsed"] = parsed.isna()
    hourly_df["time"] = parsed.dt.tz_localize(
        safe_timezone(tz_name),
        ambiguous=first_occurrence.to_numpy(),
        nonexistent="shift_forward",
    )
    hourly_df["precipitation_probability"] = pd.to_numeric(
        hourly_df["precipitation_probability"], errors="coerce"
    )
    return hourly_df


def _as_local_timestamp(now, tz_name: str) -> pd.Timestamp:
    if now is None:
        return pd.Timestamp.now(tz=tz_name)
    ts = pd.Timestamp(now)
    if ts.tzinfo is None:
        return ts.tz_localize(tz_name)
    return ts.tz_convert(tz_name)


def average_upcoming(hourly_df, tz_name: str = DEFAULT_TIMEZONE, window_hours: int = RAIN_WINDOW_HOURS, now=None):
    """
    Average the precipitation probability of the first ``window_hours``
    samples at or after ``now`` in the location's timezone.

    Unparseable sample times count as "now". Returns None when no sample
    falls at or after ``now``.
    """
    if hourly_df is None or hourly_df.empty:
        return None
    tz_name = safe_timezone(tz_name)
    now_ts = _as_local_timestamp(now, tz_name)
    times = hourly_df["time"]
    if "time_unparsed" in hourly_df:
        times = times.mask(hourly_df["time_unparsed"], now_ts)
    upcoming = hourly_df.loc[times >= now_ts, "precipitation_probability"].head(window_hours)
    if upcoming.empty:
        return None
    return round_half_up(float(upcoming.fillna(0).mean()))


def rain_chance_from_payload(payload: dict, tz_name: str, window_hours: int = RAIN_WINDOW_HOURS, now=None):
    hourly = (payload.get("hourly") or {}) if isinstance(payload, dict) else {}
    probabilities = hourly.get("precipitation_probability")
    if not isinstance(probabilities, list) or not probabilities:
        current = (payload.get("current") or {}) if isinstance(payload, dict) else {}
        precipitation = current.get("precipitation")
        return precipitation if precipitation is not None else 0

    average = average_upcoming(parse_hourly(payload, tz_name), tz_name, window_hours=window_hours, now=now)
    if average is not None:
        return average
    last = as_number(probabilities[-1])
    return last if last is not None else 0


def fetch_forecast(location: dict, window_hours: int = RAIN_WINDOW_HOURS, now: datetime | None = None, session=None):
    """Fetch current conditions and near-term rain chance from Open-Meteo."""
    http = session or requests
    tz_name = location.get("timezone") or DEFAULT_TIMEZONE
    params = {
        "latitude": location.get("latitude"),
        "longitude": location.get("longitude"),
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "forecast_days": 1,
        "timezone": tz_name,
    }
    try:
        resp = http.get(
            FORECAST_ENDPOINT,
            params=params,
            timeout=REQUEST_TIMEOUT_SECONDS,
            headers={"accept": "application/json"},
        )
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError):
        return None, "Forecast request failed"
    if not isinstance(payload, dict):
        return None, "Forecast request failed"

    current = payload.get("current") or {}
    return {
        "temperature": current.get("temperature_2m"),
        "humidity": current.get("relative_humidity_2m"),
        "rain_chance": rain_chance_from_payload(payload, tz_name, window_hours=window_hours, now=now),
        "timezone": tz_name,
    }, "OK"
