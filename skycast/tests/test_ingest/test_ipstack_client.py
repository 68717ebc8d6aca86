"""Tests for IpStackClient."""

import json
from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from skycast.ingest.ipstack_client import IpStackClient, IpStackClientError

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
BASE = "https://test-ipstack.example.com"


@pytest.fixture
def client():
    return IpStackClient(access_key="test-key-123", base_url=BASE)


@pytest.fixture
def ipstack_body() -> dict:
    with open(FIXTURE_DIR / "ipstack_sample.json") as f:
        return json.load(f)


class TestIpStackClient:
    @respx.mock
    def test_lookup_success(self, client, ipstack_body):
        route = respx.get(f"{BASE}/check", params={"access_key": "test-key-123"}).mock(
            return_value=Response(200, json=ipstack_body)
        )
        result = client.lookup()
        assert route.called
        assert result["city"] == "Estero"

    @respx.mock
    def test_in_body_error(self, client):
        respx.get(f"{BASE}/check").mock(
            return_value=Response(200, json={
                "success": False,
                "error": {"code": 101, "type": "invalid_access_key", "info": "bad key"},
            })
        )
        with pytest.raises(IpStackClientError, match="101"):
            client.lookup()

    @respx.mock
    def test_http_error(self, client):
        respx.get(f"{BASE}/check").mock(return_value=Response(500, text="oops"))
        with pytest.raises(IpStackClientError) as exc_info:
            client.lookup()
        assert exc_info.value.status_code == 500

    @respx.mock
    def test_request_error(self, client):
        respx.get(f"{BASE}/check").mock(side_effect=httpx.ConnectTimeout("slow"))
        with pytest.raises(IpStackClientError, match="Request failed"):
            client.lookup()

    def test_key_from_env(self, monkeypatch):
        monkeypatch.setenv("IPSTACK_KEY", "env-key")
        assert IpStackClient().access_key == "env-key"

    def test_missing_key(self):
        with pytest.raises(IpStackClientError, match="IPSTACK_KEY not set"):
            IpStackClient()
