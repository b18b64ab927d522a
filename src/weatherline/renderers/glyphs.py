"""Weather condition pictographs.

Pure lookup with no external dependencies. Night variants share the day
glyph, and sleet shares rain's.
"""

from __future__ import annotations

from weatherline.enums import WeatherCondition

GLYPHS: dict[WeatherCondition, str] = {
    WeatherCondition.CLEAR_DAY: "\u2600",
    WeatherCondition.CLEAR_NIGHT: "\u2600",
    WeatherCondition.RAIN: "\u2603",
    WeatherCondition.SNOW: "\u2744",
    WeatherCondition.SLEET: "\u2603",
    WeatherCondition.WIND: "\U0001f343",
    WeatherCondition.FOG: "\U0001f32b",
    WeatherCondition.CLOUDY: "\u2601",
    WeatherCondition.PARTLY_CLOUDY_DAY: "\u26c5",
    WeatherCondition.PARTLY_CLOUDY_NIGHT: "\u26c5",
}


def glyph_for(condition: WeatherCondition, fallback: str) -> str:
    """Return the pictograph for ``condition``, or ``fallback`` if it has none."""
    return GLYPHS.get(condition, fallback)
