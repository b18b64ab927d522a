"""
Prefect flow that sends the forecast digest.

One forecast fetch, one render, one send. Tasks never retry: the first
failure ends the run and is re-raised to the caller.

Run locally (settings from environment / weatherline.toml):
    python -m weatherline.flows.notify
"""

from __future__ import annotations

from datetime import datetime

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from weatherline.config import Settings, check_settings, get_settings
from weatherline.datasources.forecast import ForecastClient, ForecastResponse
from weatherline.datasources.line_notify import LineNotifyClient
from weatherline.renderers import digest


# Task inputs carry API tokens; nothing is cached or persisted.
@task(name="fetch-forecast", cache_policy=NO_CACHE)
def fetch_forecast(settings: Settings) -> ForecastResponse:
    """Fetch hourly and daily forecast for the configured location."""
    client = ForecastClient(
        settings.forecast_token.get_secret_value(),
        settings.latitude,
        settings.longitude,
    )
    return client.get(settings.language, settings.unit_system)


@task(name="render-digest", cache_policy=NO_CACHE)
def render_digest(reference_date: datetime, forecast: ForecastResponse) -> str:
    """Render the digest text for ``reference_date``."""
    return digest.render_digest(reference_date, forecast)


@task(name="send-digest", cache_policy=NO_CACHE)
def send_digest(settings: Settings, message: str) -> None:
    """Post the digest to LINE Notify."""
    LineNotifyClient(settings.line_token.get_secret_value()).send(message)


@flow(name="send-forecast", log_prints=True)
def send_forecast(settings: Settings, reference_date: datetime | None = None) -> str:
    """
    Fetch, render and send the forecast digest.

    Args:
        settings: Resolved settings (tokens, location, lang, units).
        reference_date: Date the digest is about; now when None. Naive
            values are read in the forecast's time zone.

    Returns:
        The digest text that was sent.
    """
    print(
        f"Fetching forecast for ({settings.latitude}, {settings.longitude}) "
        f"lang={settings.language.description} units={settings.unit_system.description}..."
    )
    forecast = fetch_forecast(settings)

    if reference_date is None:
        reference_date = datetime.now(forecast.timezone)

    message = render_digest(reference_date, forecast)
    print(
        f"Rendered digest for {reference_date:%Y-%m-%d %H:00} "
        f"({len(forecast.hourly.data)} hourly, {len(forecast.daily.data)} daily records)"
    )

    send_digest(settings, message)
    print("Sent digest to LINE Notify.")
    return message


if __name__ == "__main__":
    _settings = get_settings()
    check_settings(_settings)
    send_forecast(_settings)
