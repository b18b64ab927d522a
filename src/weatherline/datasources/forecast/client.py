"""Forecast API client.

API docs (Dark Sky compatible): https://darksky.net/dev/docs

Only the hourly and daily blocks are requested; everything else is excluded
to keep responses small.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from pydantic import ValidationError

from weatherline.datasources.forecast.models import ForecastErrorBody, ForecastResponse
from weatherline.enums import Language, UnitSystem
from weatherline.errors import DecodeError, ForecastError
from weatherline.services.http import create_session

if TYPE_CHECKING:
    import requests

FORECAST_API_BASE = "https://api.darksky.net"

# Blocks we never ask for
EXCLUDES = [
    "currently",
    "minutely",
    "alerts",
    "flags",
]


def build_forecast_url(base_url: str, token: str, latitude: str, longitude: str) -> str:
    """
    Build ``{base_url}/forecast/{token}/{latitude},{longitude}``.

    Raises:
        ValueError: ``base_url`` has no scheme or host.
    """
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid forecast API base URL: {base_url!r}")
    prefix = parts.path.rstrip("/")
    path = f"{prefix}/forecast/{token}/{latitude},{longitude}"
    return f"{parts.scheme}://{parts.netloc}{path}"


class ForecastClient:
    """Fetches the forecast for one fixed location."""

    def __init__(
        self,
        token: str,
        latitude: str,
        longitude: str,
        *,
        base_url: str = FORECAST_API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self.url = build_forecast_url(base_url, token, latitude, longitude)
        self.session = session or create_session()

    def get(
        self,
        language: Language = Language.UNKNOWN,
        unit_system: UnitSystem = UnitSystem.UNKNOWN,
    ) -> ForecastResponse:
        """
        Fetch and decode the forecast.

        Args:
            language: Summary text language; omitted from the query if UNKNOWN.
            unit_system: Unit system; omitted from the query if UNKNOWN.

        Raises:
            requests.RequestException: Transport failure.
            DecodeError: The response body was not the expected JSON.
            ForecastError: The API answered with a non-200 status.
        """
        params: dict[str, str] = {}
        if language is not Language.UNKNOWN:
            params["lang"] = language.value
        if unit_system is not UnitSystem.UNKNOWN:
            params["units"] = unit_system.value
        params["exclude"] = ",".join(EXCLUDES)

        with self.session.get(self.url, params=params) as resp:
            status = resp.status_code
            body = resp.content

        if status == 200:
            try:
                return ForecastResponse.model_validate_json(body)
            except ValidationError as e:
                raise DecodeError(f"invalid forecast response: {e}") from e

        if status == 400:
            try:
                err = ForecastErrorBody.model_validate_json(body)
            except ValidationError as e:
                raise DecodeError(f"invalid forecast error response: {e}") from e
            raise ForecastError(err.code, err.error)

        raise ForecastError(status, body.decode("utf-8", errors="replace"))
