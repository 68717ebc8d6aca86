"""Decode raw 7Timer and ipstack JSON bodies into models.

Upstream payloads are trusted. Missing keys decode to zero values.
"""

from skycast.models.forecast import (
    CivilForecast,
    CivilPoint,
    DailyPoint,
    MeteoForecast,
    MeteoPoint,
    RhProfile,
    SevenDayForecast,
    TempRange,
    Wind10m,
    WindProfile,
)
from skycast.models.location import Location


def _wind10m(raw: dict | None, default_direction: str | int) -> Wind10m:
    raw = raw or {}
    return Wind10m(
        direction=raw.get("direction", default_direction),
        speed=int(raw.get("speed", 0)),
    )


def parse_civil(raw: dict) -> CivilForecast:
    points = tuple(
        CivilPoint(
            timepoint=int(p.get("timepoint", 0)),
            cloudcover=int(p.get("cloudcover", 0)),
            lifted_index=int(p.get("lifted_index", 0)),
            prec_type=p.get("prec_type", ""),
            prec_amount=float(p.get("prec_amount", 0)),
            temp2m=int(p.get("temp2m", 0)),
            rh2m=str(p.get("rh2m", "")),
            wind10m=_wind10m(p.get("wind10m"), ""),
            weather=p.get("weather", ""),
        )
        for p in raw.get("dataseries", [])
    )
    return CivilForecast(
        product=raw.get("product", ""),
        init=str(raw.get("init", "")),
        dataseries=points,
    )


def parse_meteo(raw: dict) -> MeteoForecast:
    points = tuple(
        MeteoPoint(
            timepoint=int(p.get("timepoint", 0)),
            cloudcover=int(p.get("cloudcover", 0)),
            highcloud=int(p.get("highcloud", 0)),
            midcloud=int(p.get("midcloud", 0)),
            lowcloud=int(p.get("lowcloud", 0)),
            rh_profile=tuple(
                RhProfile(layer=r.get("layer", ""), rh=int(r.get("rh", 0)))
                for r in p.get("rh_profile", [])
            ),
            wind_profile=tuple(
                WindProfile(
                    layer=w.get("layer", ""),
                    direction=int(w.get("direction", 0)),
                    speed=int(w.get("speed", 0)),
                )
                for w in p.get("wind_profile", [])
            ),
            temp2m=int(p.get("temp2m", 0)),
            lifted_index=int(p.get("lifted_index", 0)),
            rh2m=int(p.get("rh2m", 0)),
            msl_pressure=int(p.get("msl_pressure", 0)),
            wind10m=_wind10m(p.get("wind10m"), 0),
            prec_type=p.get("prec_type", ""),
            prec_amount=float(p.get("prec_amount", 0)),
            snow_depth=int(p.get("snow_depth", 0)),
        )
        for p in raw.get("dataseries", [])
    )
    return MeteoForecast(
        product=raw.get("product", ""),
        init=str(raw.get("init", "")),
        dataseries=points,
    )


def parse_civillight(raw: dict) -> SevenDayForecast:
    points = []
    for p in raw.get("dataseries", []):
        temp = p.get("temp2m", {}) or {}
        points.append(
            DailyPoint(
                date=int(p.get("date", 0)),
                weather=p.get("weather", ""),
                temp2m=TempRange(max=int(temp.get("max", 0)), min=int(temp.get("min", 0))),
                wind10m_max=int(p.get("wind10m_max", 0)),
            )
        )
    return SevenDayForecast(
        product=raw.get("product", ""),
        init=str(raw.get("init", "")),
        dataseries=tuple(points),
    )


def parse_location(raw: dict) -> Location:
    return Location(
        latitude=float(raw.get("latitude") or 0.0),
        longitude=float(raw.get("longitude") or 0.0),
        ip=raw.get("ip", "") or "",
        city=raw.get("city", "") or "",
        region_name=raw.get("region_name", "") or "",
        country_code=raw.get("country_code", "") or "",
    )
