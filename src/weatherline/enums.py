"""
Wire-token enumerations for the forecast API.

Each enum is a closed ``StrEnum`` whose value is the token the API speaks.
Lookups are total: unrecognized tokens map to ``UNKNOWN`` (token ``""``)
instead of raising.

Example::

    >>> Language("ja")
    <Language.JA: 'ja'>
    >>> Language("fr")
    <Language.UNKNOWN: ''>
    >>> to_token(UnitSystem.UNKNOWN)
    ''
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from weatherline.errors import DecodeError


class _TokenEnum(StrEnum):
    """StrEnum that falls back to ``UNKNOWN`` for any unmapped value."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        return cls["UNKNOWN"]

    @classmethod
    def from_token(cls, token: str) -> Any:
        """Look up a member by wire token; never raises."""
        return cls(token)


class Language(_TokenEnum):
    """``lang`` query parameter."""

    UNKNOWN = ""
    EN = "en"  # English (the API default)
    JA = "ja"  # Japanese

    @property
    def description(self) -> str:
        return _LANGUAGE_NAMES.get(self, "?? (Unknown)")


class UnitSystem(_TokenEnum):
    """``units`` query parameter."""

    UNKNOWN = ""
    US = "us"  # Imperial units (the API default)
    SI = "si"

    @property
    def description(self) -> str:
        return _UNIT_NAMES.get(self, "?? (Unknown)")


class WeatherCondition(_TokenEnum):
    """``icon`` field of a data point or data block."""

    UNKNOWN = ""
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    WIND = "wind"
    FOG = "fog"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"


_LANGUAGE_NAMES = {
    Language.EN: "en (English)",
    Language.JA: "ja (Japanese)",
}

_UNIT_NAMES = {
    UnitSystem.US: "us (Imperial units)",
    UnitSystem.SI: "si (SI units)",
}


def to_token(value: _TokenEnum) -> str:
    """Return the wire token for ``value``; ``""`` for ``UNKNOWN``."""
    return value.value


def decode_condition(value: object) -> WeatherCondition:
    """
    Decode a raw JSON ``icon`` value.

    Raises:
        DecodeError: ``value`` is not a JSON string. Unrecognized strings are
            not an error and decode to ``WeatherCondition.UNKNOWN``.
    """
    if not isinstance(value, str):
        raise DecodeError(f"weather condition must be a string, got {type(value).__name__}")
    return WeatherCondition(value)
