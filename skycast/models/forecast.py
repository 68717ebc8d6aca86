"""7Timer forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Wind10m:
    direction: str | int  # compass point (CIVIL) or degrees (METEO)
    speed: int


@dataclass(frozen=True)
class RhProfile:
    layer: str
    rh: int


@dataclass(frozen=True)
class WindProfile:
    layer: str
    direction: int
    speed: int


@dataclass(frozen=True)
class CivilPoint:
    timepoint: int
    cloudcover: int
    lifted_index: int
    prec_type: str
    prec_amount: float
    temp2m: int
    rh2m: str  # e.g. "78%"
    wind10m: Wind10m
    weather: str


@dataclass(frozen=True)
class CivilForecast:
    product: str
    init: str  # YYYYMMDDHH
    dataseries: tuple[CivilPoint, ...]


@dataclass(frozen=True)
class MeteoPoint:
    timepoint: int
    cloudcover: int
    highcloud: int
    midcloud: int
    lowcloud: int
    rh_profile: tuple[RhProfile, ...]
    wind_profile: tuple[WindProfile, ...]
    temp2m: int
    lifted_index: int
    rh2m: int
    msl_pressure: int
    wind10m: Wind10m
    prec_type: str
    prec_amount: float
    snow_depth: int


@dataclass(frozen=True)
class MeteoForecast:
    product: str
    init: str  # YYYYMMDDHH
    dataseries: tuple[MeteoPoint, ...]


@dataclass(frozen=True)
class CloudProfile:
    highcloud: int
    midcloud: int
    lowcloud: int


@dataclass(frozen=True)
class WeatherPoint:
    datetime: str  # MM/DD/YYYY HH:MM:SS
    cloudcover: int
    cloudprofile: CloudProfile
    rh_profile: tuple[RhProfile, ...]
    wind_profile: tuple[WindProfile, ...]
    prec_type: str
    prec_amount: float
    temp2m: int
    rh2m: str
    lifted_index: int
    msl_pressure: int
    wind10m: Wind10m
    snow_depth: int
    weather: str


@dataclass(frozen=True)
class WeatherForecast:
    product: str
    init: str  # MM/DD/YYYY HH:MM:SS
    dataseries: tuple[WeatherPoint, ...]


@dataclass(frozen=True)
class TempRange:
    max: int
    min: int


@dataclass(frozen=True)
class DailyPoint:
    date: int  # YYYYMMDD
    weather: str
    temp2m: TempRange
    wind10m_max: int


@dataclass(frozen=True)
class SevenDayForecast:
    product: str
    init: str
    dataseries: tuple[DailyPoint, ...]
