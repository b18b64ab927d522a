"""Tests for the forecast API client."""

from __future__ import annotations

import io
import json
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from weatherline.datasources.forecast import (
    FORECAST_API_BASE,
    ForecastClient,
    ForecastResponse,
    build_forecast_url,
)
from weatherline.enums import Language, UnitSystem, WeatherCondition
from weatherline.errors import DecodeError, ForecastError

FORECAST_BODY: dict[str, Any] = {
    "latitude": 35.6895,
    "longitude": 139.6917,
    "timezone": "Asia/Tokyo",
    "hourly": {
        "summary": "Clear throughout the day.",
        "icon": "clear-day",
        "data": [
            {
                "time": 1514764800,
                "summary": "Clear",
                "icon": "clear-night",
                "precipProbability": 0,
                "temperature": 1.2,
                "apparentTemperature": -1.8,
            },
        ],
    },
    "daily": {
        "summary": "Snow on Tuesday.",
        "icon": "snow",
        "data": [
            {
                "time": 1514732400,
                "summary": "Snow in the evening.",
                "icon": "snow",
                "precipProbability": 0.7,
                "precipAccumulation": 5.1,
                "temperatureHigh": 4.5,
                "temperatureHighTime": 1514786400,
                "temperatureLow": -2.0,
                "temperatureLowTime": 1514840400,
                "apparentTemperatureHigh": 2.1,
                "apparentTemperatureHighTime": 1514786400,
                "apparentTemperatureLow": -6.3,
                "apparentTemperatureLowTime": 1514840400,
            },
        ],
    },
}


def _response(status: int, body: str) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.raw = io.BytesIO(body.encode("utf-8"))
    return resp


def _sent(mock_send: Mock) -> requests.PreparedRequest:
    request: requests.PreparedRequest = mock_send.call_args[0][0]
    return request


class TestBuildForecastUrl:
    """URL construction."""

    def test_default_base(self) -> None:
        url = build_forecast_url(FORECAST_API_BASE, "abc", "35.6895", "139.6917")
        assert url == "https://api.darksky.net/forecast/abc/35.6895,139.6917"

    def test_base_with_path(self) -> None:
        url = build_forecast_url("http://localhost:8080/proxy/", "t", "1", "2")
        assert url == "http://localhost:8080/proxy/forecast/t/1,2"

    @pytest.mark.parametrize("base", ["", "api.darksky.net", "://missing-scheme", "https://"])
    def test_invalid_base(self, base: str) -> None:
        with pytest.raises(ValueError, match="invalid forecast API base URL"):
            build_forecast_url(base, "t", "1", "2")


class TestForecastClient:
    """ForecastClient construction and get()."""

    def test_init(self) -> None:
        client = ForecastClient("abc", "35.6895", "139.6917")
        assert client.url == "https://api.darksky.net/forecast/abc/35.6895,139.6917"
        assert isinstance(client.session, requests.Session)

    def test_init_invalid_base(self) -> None:
        with pytest.raises(ValueError):
            ForecastClient("abc", "1", "2", base_url="not a url")

    def test_get_ok(self) -> None:
        body = json.dumps(FORECAST_BODY)
        client = ForecastClient("abc", "35.6895", "139.6917")

        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=_response(200, body)
        ) as mock_send:
            forecast = client.get(Language.JA, UnitSystem.SI)

        assert forecast == ForecastResponse.model_validate_json(body)
        assert forecast.daily.data[0].condition is WeatherCondition.SNOW
        mock_send.assert_called_once()

        sent = _sent(mock_send)
        assert sent.method == "GET"
        assert sent.url == (
            "https://api.darksky.net/forecast/abc/35.6895,139.6917"
            "?lang=ja&units=si&exclude=currently%2Cminutely%2Calerts%2Cflags"
        )

    def test_get_omits_unknown_params(self) -> None:
        client = ForecastClient("abc", "1", "2")
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=_response(200, "{}")
        ) as mock_send:
            client.get(Language.UNKNOWN, UnitSystem.UNKNOWN)

        assert _sent(mock_send).url == (
            "https://api.darksky.net/forecast/abc/1,2"
            "?exclude=currently%2Cminutely%2Calerts%2Cflags"
        )

    def test_get_invalid_json(self) -> None:
        client = ForecastClient("abc", "1", "2")
        with (
            patch.object(
                requests.adapters.HTTPAdapter, "send", return_value=_response(200, "{not json")
            ),
            pytest.raises(DecodeError),
        ):
            client.get(Language.EN, UnitSystem.US)

    def test_get_wrong_shape(self) -> None:
        client = ForecastClient("abc", "1", "2")
        body = json.dumps({"hourly": {"data": [{"time": "yesterday"}]}})
        with (
            patch.object(requests.adapters.HTTPAdapter, "send", return_value=_response(200, body)),
            pytest.raises(DecodeError),
        ):
            client.get(Language.EN, UnitSystem.US)

    def test_get_bad_request(self) -> None:
        client = ForecastClient("abc", "1", "2")
        body = json.dumps({"code": 400, "error": "x"})
        with (
            patch.object(requests.adapters.HTTPAdapter, "send", return_value=_response(400, body)),
            pytest.raises(ForecastError) as exc_info,
        ):
            client.get(Language.EN, UnitSystem.US)

        assert exc_info.value == ForecastError(400, "x")
        assert exc_info.value.code == 400
        assert exc_info.value.message == "x"
        assert str(exc_info.value) == "400: x"

    def test_get_bad_request_undecodable(self) -> None:
        client = ForecastClient("abc", "1", "2")
        with (
            patch.object(
                requests.adapters.HTTPAdapter, "send", return_value=_response(400, "Bad Request")
            ),
            pytest.raises(DecodeError),
        ):
            client.get(Language.EN, UnitSystem.US)

    @pytest.mark.parametrize("status", [401, 403, 500, 503])
    def test_get_other_status_uses_raw_body(self, status: int) -> None:
        client = ForecastClient("abc", "1", "2")
        with (
            patch.object(
                requests.adapters.HTTPAdapter, "send", return_value=_response(status, "boom")
            ),
            pytest.raises(ForecastError) as exc_info,
        ):
            client.get(Language.EN, UnitSystem.US)

        assert exc_info.value == ForecastError(status, "boom")

    def test_get_other_status_json_body_not_decoded(self) -> None:
        client = ForecastClient("abc", "1", "2")
        body = '{"code": 500, "error": "x"}'
        with (
            patch.object(requests.adapters.HTTPAdapter, "send", return_value=_response(500, body)),
            pytest.raises(ForecastError) as exc_info,
        ):
            client.get(Language.EN, UnitSystem.US)

        assert exc_info.value.message == body

    def test_get_transport_error_propagates(self) -> None:
        client = ForecastClient("abc", "1", "2")
        with (
            patch.object(
                requests.adapters.HTTPAdapter,
                "send",
                side_effect=requests.ConnectionError("connection refused"),
            ) as mock_send,
            pytest.raises(requests.ConnectionError),
        ):
            client.get(Language.EN, UnitSystem.US)

        mock_send.assert_called_once()
