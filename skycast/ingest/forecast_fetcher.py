"""Forecast fetcher: retrieves and decodes the 7Timer feeds for a location."""

import logging

from skycast.ingest.feed_parser import parse_civil, parse_civillight, parse_meteo
from skycast.ingest.seventimer_client import SevenTimerClient
from skycast.models.forecast import CivilForecast, MeteoForecast, SevenDayForecast
from skycast.models.location import Location

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: SevenTimerClient):
        self.client = client

    def fetch(self, location: Location) -> tuple[CivilForecast, MeteoForecast]:
        """Fetch CIVIL then METEO for a location. Client errors propagate."""
        raw_civil = self.client.get_product("civil", location.latitude, location.longitude)
        civil = parse_civil(raw_civil)
        logger.info(
            "Fetched CIVIL init=%s with %d points for %s",
            civil.init, len(civil.dataseries), location.label,
        )

        raw_meteo = self.client.get_product("meteo", location.latitude, location.longitude)
        meteo = parse_meteo(raw_meteo)
        logger.info(
            "Fetched METEO init=%s with %d points for %s",
            meteo.init, len(meteo.dataseries), location.label,
        )

        if civil.init != meteo.init:
            logger.warning(
                "CIVIL and METEO init times differ (%s vs %s); using METEO",
                civil.init, meteo.init,
            )
        return civil, meteo

    def fetch_outlook(self, location: Location) -> SevenDayForecast:
        raw = self.client.get_product("civillight", location.latitude, location.longitude)
        outlook = parse_civillight(raw)
        logger.info(
            "Fetched CIVIL-light init=%s with %d days for %s",
            outlook.init, len(outlook.dataseries), location.label,
        )
        return outlook
