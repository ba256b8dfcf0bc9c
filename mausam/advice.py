from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from mausam.formatting import as_number
from mausam.messages import message

HOT_TEMP_C = 38
COLD_TEMP_C = 10
WARM_TEMP_C = 28
HUMID_PCT = 75
DRY_PCT = 35
RAIN_LIKELY_PCT = 60
RAIN_POSSIBLE_PCT = 30


def season_for_month(month: int) -> str:
    if 3 <= month <= 5:
        return "spring_summer"
    if 6 <= month <= 9:
        return "monsoon"
    if month in (10, 11):
        return "autumn"
    return "winter"


def local_month(tz_name: str | None, now: datetime | None = None) -> int:
    """Current month at the location; falls back to host local time for unknown zones."""
    now = now or datetime.now().astimezone()
    if tz_name:
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            tz = None
        if tz is not None:
            if now.tzinfo is None:
                now = now.astimezone()
            return now.astimezone(tz).month
    return now.astimezone().month


def _temperature_key(temp: float) -> str:
    if temp >= HOT_TEMP_C:
        return "advice_temp_hot"
    if temp <= COLD_TEMP_C:
        return "advice_temp_cold"
    if temp >= WARM_TEMP_C:
        return "advice_temp_warm"
    return "advice_temp_mild"


def _humidity_key(humidity: float) -> str | None:
    if humidity >= HUMID_PCT:
        return "advice_humidity_high"
    if humidity <= DRY_PCT:
        return "advice_humidity_low"
    return None


def _rain_key(rain_chance: float) -> str:
    if rain_chance >= RAIN_LIKELY_PCT:
        return "advice_rain_likely"
    if rain_chance >= RAIN_POSSIBLE_PCT:
        return "advice_rain_possible"
    return "advice_rain_low"


def build_advice(temperature, humidity, rain_chance, month: int, language: str | None = None) -> str:
    season = message(f"season_{season_for_month(month)}", language)
    parts = [message("advice_season", language, season=season)]

    temp = as_number(temperature)
    if temp is not None:
        parts.append(message(_temperature_key(temp), language))

    hum = as_number(humidity)
    if hum is not None:
        key = _humidity_key(hum)
        if key:
            parts.append(message(key, language))

    rain = as_number(rain_chance)
    if rain is not None:
        parts.append(message(_rain_key(rain), language))

    return " ".join(parts)
