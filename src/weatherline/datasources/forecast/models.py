"""Forecast API response models.

Field names follow the API's camelCase JSON via aliases; Python code uses the
snake_case attribute names. Every model is frozen: a ``ForecastResponse`` is
built once per request and only read afterwards.

Fields the API omits take zero values (``0.0``, ``""``, ``UNKNOWN``, the
epoch), so hourly points simply carry zeroed daily-only fields.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from weatherline.enums import WeatherCondition, decode_condition
from weatherline.errors import DecodeError

EPOCH = datetime.fromtimestamp(0, tz=UTC)


def decode_timestamp(value: object) -> datetime:
    """Decode integer epoch seconds into an aware UTC datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"timestamp must be an integer, got {type(value).__name__}")
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"timestamp out of range: {value}") from e


def decode_timezone(value: object) -> tzinfo:
    """Look up an IANA zone name, falling back to UTC when it is unknown."""
    if isinstance(value, tzinfo):
        return value
    if not isinstance(value, str):
        raise DecodeError(f"timezone must be a string, got {type(value).__name__}")
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return UTC


Condition = Annotated[WeatherCondition, BeforeValidator(decode_condition)]
Timestamp = Annotated[datetime, BeforeValidator(decode_timestamp)]
TimeZoneRef = Annotated[tzinfo, BeforeValidator(decode_timezone)]


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
    )


class DataPoint(_ApiModel):
    """One hourly or daily forecast record."""

    condition: Condition = Field(default=WeatherCondition.UNKNOWN, alias="icon")
    summary: str = ""
    time: Timestamp = EPOCH
    temperature: float = 0.0
    apparent_temperature: float = 0.0
    precip_probability: float = Field(default=0.0, description="Fraction 0-1")
    precip_accumulation: float = Field(default=0.0, description="Snowfall in cm (si units)")

    # Daily only
    temperature_high: float = 0.0
    temperature_high_time: Timestamp = EPOCH
    temperature_low: float = 0.0
    temperature_low_time: Timestamp = EPOCH
    apparent_temperature_high: float = 0.0
    apparent_temperature_high_time: Timestamp = EPOCH
    apparent_temperature_low: float = 0.0
    apparent_temperature_low_time: Timestamp = EPOCH


class DataBlock(_ApiModel):
    """Ordered records for one granularity (hourly or daily)."""

    data: tuple[DataPoint, ...] = ()
    condition: Condition = Field(default=WeatherCondition.UNKNOWN, alias="icon")
    summary: str = ""


class ForecastResponse(_ApiModel):
    """Decoded forecast: time zone plus the hourly and daily blocks."""

    timezone: TimeZoneRef = UTC
    hourly: DataBlock = DataBlock()
    daily: DataBlock = DataBlock()


class ForecastErrorBody(BaseModel):
    """Error payload the API returns with HTTP 400."""

    model_config = ConfigDict(strict=True, frozen=True)

    code: int = 0
    error: str = ""
