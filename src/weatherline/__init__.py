"""weatherline - send a weather forecast digest to LINE.

Architecture::

    enums.py       Wire-token enums (language, units, weather condition)
    errors.py      Error taxonomy (transport, decode, provider, usage)
    datasources/   External APIs (forecast provider, LINE Notify)
    renderers/     Pure data -> text (the forecast digest)
    flows/         Prefect orchestration (fetch, render, send)
    services/      Shared utilities (HTTP session factory)
    config.py      Settings from defaults, environment, TOML file, CLI flags

Data flow: datasources.forecast -> renderers.digest -> datasources.line_notify
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
