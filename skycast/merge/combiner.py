"""Combine the CIVIL and METEO series into one forecast."""

import logging

from skycast.models.forecast import (
    CivilForecast,
    CloudProfile,
    MeteoForecast,
    WeatherForecast,
    WeatherPoint,
)
from skycast.models.timestamp import add_hours, format_timestamp, parse_compact

logger = logging.getLogger(__name__)

PRODUCT_NAME = "Weather Forecast"


class ForecastMergeError(Exception):
    """Raised when the two series cannot be aligned."""


class SeriesLengthMismatchError(ForecastMergeError):
    def __init__(self, civil_length: int, meteo_length: int):
        super().__init__(
            f"The METEO and CIVIL feeds returned different numbers of data points "
            f"(civil={civil_length}, meteo={meteo_length})"
        )
        self.civil_length = civil_length
        self.meteo_length = meteo_length


class SeriesTimepointMismatchError(ForecastMergeError):
    def __init__(self, index: int, civil_timepoint: int, meteo_timepoint: int):
        super().__init__(
            f"Timepoint mismatch at index {index}: "
            f"civil=+{civil_timepoint}h, meteo=+{meteo_timepoint}h"
        )
        self.index = index
        self.civil_timepoint = civil_timepoint
        self.meteo_timepoint = meteo_timepoint


def _check_aligned(civil: CivilForecast, meteo: MeteoForecast) -> None:
    if len(civil.dataseries) != len(meteo.dataseries):
        raise SeriesLengthMismatchError(len(civil.dataseries), len(meteo.dataseries))
    for i, (c, m) in enumerate(zip(civil.dataseries, meteo.dataseries)):
        if c.timepoint != m.timepoint:
            raise SeriesTimepointMismatchError(i, c.timepoint, m.timepoint)


def combine(
    civil: CivilForecast, meteo: MeteoForecast, strict_timestamps: bool = False
) -> WeatherForecast:
    """Merge the two series index by index.

    METEO supplies the multi-layer profile (clouds, humidity and wind
    aloft, pressure, surface wind, precipitation, snow). CIVIL supplies
    the 2m relative humidity and the weather category. Datetimes are
    anchored on the METEO init time.

    Raises ForecastMergeError before building any record if the series
    differ in length or timepoints.
    """
    _check_aligned(civil, meteo)

    init_time = parse_compact(meteo.init, strict=strict_timestamps)
    points = []
    for c, m in zip(civil.dataseries, meteo.dataseries):
        points.append(
            WeatherPoint(
                datetime=format_timestamp(add_hours(init_time, m.timepoint)),
                cloudcover=m.cloudcover,
                cloudprofile=CloudProfile(
                    highcloud=m.highcloud,
                    midcloud=m.midcloud,
                    lowcloud=m.lowcloud,
                ),
                rh_profile=m.rh_profile,
                wind_profile=m.wind_profile,
                prec_type=m.prec_type,
                prec_amount=m.prec_amount,
                temp2m=m.temp2m,
                rh2m=c.rh2m,
                lifted_index=m.lifted_index,
                msl_pressure=m.msl_pressure,
                wind10m=m.wind10m,
                snow_depth=m.snow_depth,
                weather=c.weather,
            )
        )

    logger.debug("Combined %d data points from init %s", len(points), meteo.init)
    return WeatherForecast(
        product=PRODUCT_NAME,
        init=format_timestamp(init_time),
        dataseries=tuple(points),
    )
