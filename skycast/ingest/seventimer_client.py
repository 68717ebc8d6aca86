"""7Timer forecast API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

SEVENTIMER_BASE_URL = "https://www.7timer.info"
DEFAULT_USER_AGENT = "skycast/0.1.0"
PRODUCTS = ("civil", "meteo", "civillight")


class SevenTimerClientError(Exception):
    """Raised when a 7Timer request fails or returns an unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SevenTimerClient:
    def __init__(
        self,
        base_url: str = SEVENTIMER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        ac: int = 0,
        unit: str = "metric",
        tzshift: int = 0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.ac = ac
        self.unit = unit
        self.tzshift = tzshift

    def get_product(self, product: str, latitude: float, longitude: float) -> dict:
        """Fetch one 7Timer product (civil, meteo or civillight) as JSON.

        7Timer serves JSON with a text/html content type, so the body is
        decoded regardless of the header.
        """
        if product not in PRODUCTS:
            raise ValueError(f"Unknown 7Timer product: {product}")

        url = f"{self.base_url}/bin/{product}.php"
        params = {
            "lon": f"{longitude:.6f}",
            "lat": f"{latitude:.6f}",
            "ac": self.ac,
            "unit": self.unit,
            "output": "json",
            "tzshift": self.tzshift,
        }
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("7Timer %s request failed: %s", product, e)
            raise SevenTimerClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("7Timer %s returned %d", product, resp.status_code)
            raise SevenTimerClientError(
                f"HTTP {resp.status_code} for {product}", resp.status_code
            )
        try:
            return resp.json()
        except ValueError as e:
            logger.error("7Timer %s returned a non-JSON body", product)
            raise SevenTimerClientError(f"Invalid JSON from {product}: {e}") from e
