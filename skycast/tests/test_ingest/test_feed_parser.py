"""Tests for decoding 7Timer and ipstack bodies."""

import json
from pathlib import Path

from skycast.ingest.feed_parser import (
    parse_civil,
    parse_civillight,
    parse_location,
    parse_meteo,
)
from skycast.models.forecast import RhProfile, Wind10m, WindProfile

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


class TestParseCivil:
    def test_header(self, civil_raw):
        civil = parse_civil(civil_raw)
        assert civil.product == "civil"
        assert civil.init == "2022111812"
        assert len(civil.dataseries) == 3

    def test_point(self, civil_raw):
        p = parse_civil(civil_raw).dataseries[0]
        assert p.timepoint == 3
        assert p.rh2m == "78%"
        assert p.weather == "clearday"
        assert p.wind10m == Wind10m(direction="NE", speed=3)

    def test_missing_keys_default(self):
        civil = parse_civil({"init": "2022111812", "dataseries": [{"timepoint": 3}]})
        p = civil.dataseries[0]
        assert p.rh2m == ""
        assert p.weather == ""
        assert p.wind10m == Wind10m(direction="", speed=0)

    def test_integer_init(self):
        assert parse_civil({"init": 2022111812}).init == "2022111812"


class TestParseMeteo:
    def test_profiles(self, meteo_raw):
        p = parse_meteo(meteo_raw).dataseries[0]
        assert p.rh_profile == (RhProfile("950mb", 5), RhProfile("900mb", 3))
        assert p.wind_profile[1] == WindProfile(layer="900mb", direction=75, speed=6)
        assert p.highcloud == -9999
        assert p.msl_pressure == 1015
        assert p.wind10m == Wind10m(direction=45, speed=3)

    def test_empty(self):
        meteo = parse_meteo({})
        assert meteo.dataseries == ()
        assert meteo.init == ""


class TestParseCivillight:
    def test_days(self):
        outlook = parse_civillight(_load("civillight_sample.json"))
        assert len(outlook.dataseries) == 2
        day = outlook.dataseries[1]
        assert day.date == 20221119
        assert day.weather == "lightrain"
        assert day.temp2m.max == 25
        assert day.temp2m.min == 19
        assert day.wind10m_max == 4


class TestParseLocation:
    def test_ipstack_body(self):
        loc = parse_location(_load("ipstack_sample.json"))
        assert loc.city == "Estero"
        assert loc.region_name == "Florida"
        assert loc.country_code == "US"
        assert abs(loc.latitude - 26.43516) < 1e-4
        assert abs(loc.longitude + 81.81091) < 1e-4
        assert loc.label == "Estero, Florida, US"

    def test_null_fields(self):
        loc = parse_location({"latitude": None, "longitude": None, "city": None})
        assert loc.latitude == 0.0
        assert loc.city == ""
        assert loc.label == "0.0000,0.0000"
