"""Forecast pipeline: locate, fetch, merge and persist."""

import logging
from dataclasses import dataclass
from pathlib import Path

from skycast.config.schema import SkycastConfig
from skycast.ingest.feed_parser import parse_location
from skycast.ingest.forecast_fetcher import ForecastFetcher
from skycast.ingest.ipstack_client import IpStackClient
from skycast.ingest.seventimer_client import SevenTimerClient
from skycast.merge.combiner import combine
from skycast.models.forecast import WeatherForecast
from skycast.models.location import Location
from skycast.storage.forecast_writer import write_forecast

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    location: Location
    forecast: WeatherForecast
    output_path: Path


def build_seventimer_client(config: SkycastConfig) -> SevenTimerClient:
    st = config.seventimer
    return SevenTimerClient(
        base_url=st.base_url,
        timeout=st.timeout,
        ac=st.ac,
        unit=st.unit,
        tzshift=st.tzshift,
    )


def resolve_location(config: SkycastConfig) -> Location:
    """Use configured coordinates if set, otherwise ask ipstack."""
    if config.location.is_fixed:
        return Location(
            latitude=config.location.latitude,
            longitude=config.location.longitude,
        )
    client = IpStackClient(
        access_key=config.ipstack.access_key or None,
        base_url=config.ipstack.base_url,
        timeout=config.ipstack.timeout,
    )
    location = parse_location(client.lookup())
    logger.info(
        "Resolved %s to %s (%.6f, %.6f)",
        location.ip, location.label, location.latitude, location.longitude,
    )
    return location


class ForecastPipeline:
    def __init__(
        self,
        config: SkycastConfig,
        fetcher: ForecastFetcher | None = None,
    ):
        self.config = config
        self.fetcher = fetcher or ForecastFetcher(build_seventimer_client(config))

    def run(self) -> RunResult:
        """Execute one fetch-merge-write cycle.

        Merge errors propagate before anything is written.
        """
        location = resolve_location(self.config)
        civil, meteo = self.fetcher.fetch(location)
        forecast = combine(
            civil, meteo, strict_timestamps=self.config.merge.strict_timestamps
        )
        output_path = write_forecast(
            forecast, self.config.output.path, indent=self.config.output.indent
        )
        return RunResult(location=location, forecast=forecast, output_path=output_path)
