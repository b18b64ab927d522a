"""
Renderers: pure data -> text.

No I/O and no shared state; every function takes a decoded
``ForecastResponse`` and returns a string.

- glyphs.py  - WeatherCondition -> pictograph lookup
- digest.py  - hourly/daily digest text sent to LINE
"""
