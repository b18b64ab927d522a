"""Forecast digest text.

Layout (``render_digest``)::

    <blank line>
    01/01
      09:00 ☀ 3.2°C/1.0°C 10%
    <blank line>
    01/02 ❄  80%/5cm
      2.0°C/-1.5°C(14:00)
      -4.0°C/-8.2°C(05:00)
    <blank line>
    ...

All instants are shown in the forecast's own time zone. A naive reference
date is read as wall-clock time in that zone.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from weatherline.enums import WeatherCondition
from weatherline.renderers.glyphs import glyph_for

if TYPE_CHECKING:
    from weatherline.datasources.forecast.models import DataPoint, ForecastResponse

#: Days after the reference date covered by the daily section.
DAILY_RANGE_DAYS = 3


def truncate_hour(moment: datetime) -> datetime:
    """Drop minutes, seconds and microseconds."""
    return moment.replace(minute=0, second=0, microsecond=0)


def _instant(moment: datetime) -> datetime:
    # Aware datetimes sharing a tzinfo compare by wall clock and ignore fold
    return moment.astimezone(UTC)


def localize(moment: datetime, tz: tzinfo) -> datetime:
    """Express ``moment`` in ``tz``; naive datetimes are taken as local to ``tz``."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def _temperature(value: float) -> str:
    return f"{value:.1f}°C"


def _precipitation(point: DataPoint) -> str:
    text = f"{point.precip_probability * 100:.0f}%"
    if point.condition is WeatherCondition.SNOW:
        text += f"/{point.precip_accumulation:.0f}cm"
    return text


def render_hourly(reference_date: datetime, forecast: ForecastResponse) -> str:
    """
    Render the hourly records that fall in the reference date's hour.

    Returns an empty string when the hourly block has no data at all. Unknown
    conditions show the record's summary text instead of a glyph.
    """
    if not forecast.hourly.data:
        return ""

    tz = forecast.timezone
    hour_start = _instant(truncate_hour(localize(reference_date, tz)))

    lines = []
    for point in forecast.hourly.data:
        at = point.time.astimezone(tz)
        if _instant(truncate_hour(at)) != hour_start:
            continue
        lines.append(
            f"  {at:%H:%M} {glyph_for(point.condition, point.summary)} "
            f"{_temperature(point.temperature)}/{_temperature(point.apparent_temperature)} "
            f"{_precipitation(point)}\n"
        )
    return "".join(lines)


def render_daily(reference_date: datetime, forecast: ForecastResponse) -> str:
    """
    Render the daily records in ``(reference_date, reference_date + 3 days]``.

    Each record is four lines: date/glyph/precipitation, high, low, blank.
    Returns an empty string when the daily block has no data at all.
    """
    if not forecast.daily.data:
        return ""

    tz = forecast.timezone
    start = truncate_hour(localize(reference_date, tz))
    end = truncate_hour(start + timedelta(days=DAILY_RANGE_DAYS))
    window_start, window_end = _instant(start), _instant(end)

    lines = []
    for point in forecast.daily.data:
        day = truncate_hour(point.time.astimezone(tz))
        if not window_start < _instant(day) <= window_end:
            continue

        high_at = point.apparent_temperature_high_time.astimezone(tz)
        low_at = point.apparent_temperature_low_time.astimezone(tz)
        lines.append(
            f"{day:%m/%d} {glyph_for(point.condition, '??')}  {_precipitation(point)}\n"
        )
        lines.append(
            f"  {_temperature(point.temperature_high)}"
            f"/{_temperature(point.apparent_temperature_high)}({high_at:%H:%M})\n"
        )
        lines.append(
            f"  {_temperature(point.temperature_low)}"
            f"/{_temperature(point.apparent_temperature_low)}({low_at:%H:%M})\n"
        )
        lines.append("\n")
    return "".join(lines)


def render_digest(reference_date: datetime, forecast: ForecastResponse) -> str:
    """Full message: header date, hourly section, daily section."""
    date = truncate_hour(localize(reference_date, forecast.timezone))

    parts = ["\n", f"{date:%m/%d}", "\n"]
    hourly = render_hourly(date, forecast)
    if hourly:
        parts.extend([hourly, "\n"])
    parts.append(render_daily(date, forecast))
    return "".join(parts)
