"""ipstack client for resolving the caller's coordinates from its IP."""

import logging
import os

import httpx

logger = logging.getLogger(__name__)

IPSTACK_BASE_URL = "http://api.ipstack.com"


class IpStackClientError(Exception):
    """Raised when ipstack returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class IpStackClient:
    def __init__(
        self,
        access_key: str | None = None,
        base_url: str = IPSTACK_BASE_URL,
        timeout: float = 30.0,
    ):
        self.access_key = access_key or os.environ.get("IPSTACK_KEY", "")
        if not self.access_key:
            raise IpStackClientError("IPSTACK_KEY not set")
        self.base_url = base_url
        self.timeout = timeout

    def lookup(self) -> dict:
        """Look up the requesting IP.

        ipstack reports failures such as a bad key with HTTP 200 and a
        ``success: false`` body, so that case is checked explicitly.
        """
        url = f"{self.base_url}/check"
        try:
            resp = httpx.get(
                url, params={"access_key": self.access_key}, timeout=self.timeout
            )
        except httpx.RequestError as e:
            logger.error("ipstack request failed: %s", e)
            raise IpStackClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("ipstack returned %d: %s", resp.status_code, resp.text)
            raise IpStackClientError(f"HTTP {resp.status_code}", resp.status_code)

        data = resp.json()
        if data.get("success") is False:
            error = data.get("error", {})
            logger.error("ipstack lookup rejected: %s", error)
            raise IpStackClientError(
                f"ipstack error {error.get('code')}: {error.get('info', 'unknown')}"
            )
        return data
