"""Persist unified forecasts as JSON and read saved raw feeds."""

import json
import logging
from pathlib import Path
from typing import Any

from skycast.models.forecast import WeatherForecast, WeatherPoint

logger = logging.getLogger(__name__)


def _point_to_dict(p: WeatherPoint) -> dict[str, Any]:
    return {
        "Datetime": p.datetime,
        "Cloudcover": p.cloudcover,
        "Cloudprofile": {
            "Highcloud": p.cloudprofile.highcloud,
            "Midcloud": p.cloudprofile.midcloud,
            "Lowcloud": p.cloudprofile.lowcloud,
        },
        "Rh_profile": [{"Layer": r.layer, "Rh": r.rh} for r in p.rh_profile],
        "Wind_profile": [
            {"Layer": w.layer, "Direction": w.direction, "Speed": w.speed}
            for w in p.wind_profile
        ],
        "Prec_type": p.prec_type,
        "Prec_amount": p.prec_amount,
        "Temp2m": p.temp2m,
        "Rh2m": p.rh2m,
        "Lifted_index": p.lifted_index,
        "Msl_pressure": p.msl_pressure,
        "Wind10m": {"Direction": p.wind10m.direction, "Speed": p.wind10m.speed},
        "Snow_depth": p.snow_depth,
        "Weather": p.weather,
    }


def forecast_to_dict(forecast: WeatherForecast) -> dict[str, Any]:
    """Document shape consumed by readers of weather_forecast.json."""
    return {
        "Product": forecast.product,
        "Init": forecast.init,
        "DataSeries": [_point_to_dict(p) for p in forecast.dataseries],
    }


def write_forecast(
    forecast: WeatherForecast, path: str | Path, indent: int | None = None
) -> Path:
    """Write the forecast document to ``path``. Returns the path written."""
    path = Path(path)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(forecast_to_dict(forecast), indent=indent))
    logger.info("Wrote %d data points to %s", len(forecast.dataseries), path)
    return path


def load_feed(path: str | Path) -> dict:
    """Load a raw 7Timer JSON body saved to disk."""
    with open(path) as f:
        return json.load(f)
