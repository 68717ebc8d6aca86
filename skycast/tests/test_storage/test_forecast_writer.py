"""Tests for forecast JSON persistence."""

import json
from pathlib import Path

from skycast.merge.combiner import combine
from skycast.storage.forecast_writer import forecast_to_dict, load_feed, write_forecast


class TestForecastToDict:
    def test_document_keys(self, civil_forecast, meteo_forecast):
        doc = forecast_to_dict(combine(civil_forecast, meteo_forecast))
        assert list(doc) == ["Product", "Init", "DataSeries"]
        assert doc["Product"] == "Weather Forecast"
        assert doc["Init"] == "11/18/2022 12:00:00"

        point = doc["DataSeries"][0]
        assert list(point) == [
            "Datetime", "Cloudcover", "Cloudprofile", "Rh_profile", "Wind_profile",
            "Prec_type", "Prec_amount", "Temp2m", "Rh2m", "Lifted_index",
            "Msl_pressure", "Wind10m", "Snow_depth", "Weather",
        ]

    def test_nested_values(self, civil_forecast, meteo_forecast):
        doc = forecast_to_dict(combine(civil_forecast, meteo_forecast))
        point = doc["DataSeries"][0]
        assert point["Datetime"] == "11/18/2022 15:00:00"
        assert point["Cloudprofile"] == {"Highcloud": -9999, "Midcloud": 12, "Lowcloud": 18}
        assert point["Rh_profile"][0] == {"Layer": "950mb", "Rh": 5}
        assert point["Wind_profile"][1] == {"Layer": "900mb", "Direction": 75, "Speed": 6}
        assert point["Wind10m"] == {"Direction": 45, "Speed": 3}
        assert point["Rh2m"] == "78%"
        assert point["Weather"] == "clearday"


class TestWriteForecast:
    def test_writes_json(self, tmp_path: Path, civil_forecast, meteo_forecast):
        forecast = combine(civil_forecast, meteo_forecast)
        out = write_forecast(forecast, tmp_path / "weather_forecast.json")

        assert out == tmp_path / "weather_forecast.json"
        data = json.loads(out.read_text())
        assert len(data["DataSeries"]) == 3
        assert data == forecast_to_dict(forecast)

    def test_creates_parent_dirs(self, tmp_path: Path, civil_forecast, meteo_forecast):
        out = write_forecast(
            combine(civil_forecast, meteo_forecast),
            tmp_path / "out" / "nested" / "f.json",
            indent=2,
        )
        assert out.exists()
        assert out.read_text().startswith("{\n  ")


class TestLoadFeed:
    def test_load(self, fixtures_dir: Path):
        raw = load_feed(fixtures_dir / "civil_sample.json")
        assert raw["product"] == "civil"
