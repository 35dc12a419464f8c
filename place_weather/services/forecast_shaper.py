"""Reshape Open-Meteo forecast payloads into per-point records.

The provider returns parallel arrays (``time``, ``temperature_2m``, ...) grouped
under ``hourly`` and ``daily``. Records are built by position: entry ``i`` of
every output list comes from index ``i`` of the ``time`` array, and any other
series that is missing, not a list, or too short contributes ``None`` at that
position. Numeric ``time`` entries are turned into strings.
"""

from collections.abc import Mapping
from typing import Any

from place_weather.models.weather import CurrentWeather, DailyWeather, HourlyWeather


def _section(raw: Any, name: str) -> Mapping[str, Any]:
    """Return ``raw[name]`` when it is a mapping, else an empty mapping."""
    if not isinstance(raw, Mapping):
        return {}
    section = raw.get(name)
    return section if isinstance(section, Mapping) else {}


def _series(section: Mapping[str, Any], key: str) -> list[Any] | None:
    values = section.get(key)
    return values if isinstance(values, list) else None


def _value_at(series: list[Any] | None, index: int) -> Any:
    if series is None or index >= len(series):
        return None
    return series[index]


def shape_current(raw: Any) -> CurrentWeather | None:
    """Build the current conditions from index 0 of the hourly series.

    Returns None when ``hourly.temperature_2m`` is missing or empty.
    """
    hourly = _section(raw, "hourly")
    temperatures = _series(hourly, "temperature_2m")
    if not temperatures:
        return None

    return CurrentWeather(
        temperature=temperatures[0],
        weather_code=_value_at(_series(hourly, "weathercode"), 0),
        precipitation=_value_at(_series(hourly, "precipitation"), 0),
        time=_value_at(_series(hourly, "time"), 0),
    )


def shape_hourly(raw: Any) -> list[HourlyWeather]:
    """One record per entry of ``hourly.time``; empty when it is missing."""
    hourly = _section(raw, "hourly")
    times = _series(hourly, "time")
    if times is None:
        return []

    temperatures = _series(hourly, "temperature_2m")
    weather_codes = _series(hourly, "weathercode")
    precipitation = _series(hourly, "precipitation")

    return [
        HourlyWeather(
            time=time,
            temperature=_value_at(temperatures, i),
            weather_code=_value_at(weather_codes, i),
            precipitation=_value_at(precipitation, i),
        )
        for i, time in enumerate(times)
    ]


def shape_daily(raw: Any) -> list[DailyWeather]:
    """One record per entry of ``daily.time``; empty when it is missing."""
    daily = _section(raw, "daily")
    dates = _series(daily, "time")
    if dates is None:
        return []

    max_temperatures = _series(daily, "temperature_2m_max")
    min_temperatures = _series(daily, "temperature_2m_min")
    weather_codes = _series(daily, "weathercode")

    return [
        DailyWeather(
            date=date,
            max_temperature=_value_at(max_temperatures, i),
            min_temperature=_value_at(min_temperatures, i),
            weather_code=_value_at(weather_codes, i),
        )
        for i, date in enumerate(dates)
    ]
