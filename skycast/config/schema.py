"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from skycast.ingest.ipstack_client import IPSTACK_BASE_URL
from skycast.ingest.seventimer_client import SEVENTIMER_BASE_URL


class SevenTimerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = SEVENTIMER_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    ac: int = Field(default=0, ge=0)
    unit: str = Field(default="metric", pattern="^(metric|british)$")
    tzshift: int = 0


class IpStackConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = IPSTACK_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    access_key: str = ""


class LocationConfig(BaseModel):
    """Fixed coordinates. When both are set, the ipstack lookup is skipped."""

    model_config = {"extra": "forbid"}

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _both_or_neither(self) -> "LocationConfig":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def is_fixed(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class MergeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    strict_timestamps: bool = False


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = "weather_forecast.json"
    indent: int | None = Field(default=None, ge=0)


class SkycastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    seventimer: SevenTimerConfig = SevenTimerConfig()
    ipstack: IpStackConfig = IpStackConfig()
    location: LocationConfig = LocationConfig()
    merge: MergeConfig = MergeConfig()
    output: OutputConfig = OutputConfig()
