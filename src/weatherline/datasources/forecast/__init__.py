"""Forecast API data source.

Public API:
  - client: ForecastClient, FORECAST_API_BASE, EXCLUDES
  - models: ForecastResponse, DataBlock, DataPoint
"""

from weatherline.datasources.forecast.client import (
    EXCLUDES,
    FORECAST_API_BASE,
    ForecastClient,
    build_forecast_url,
)
from weatherline.datasources.forecast.models import (
    DataBlock,
    DataPoint,
    ForecastErrorBody,
    ForecastResponse,
)

__all__ = [
    "EXCLUDES",
    "FORECAST_API_BASE",
    "DataBlock",
    "DataPoint",
    "ForecastClient",
    "ForecastErrorBody",
    "ForecastResponse",
    "build_forecast_url",
]
