"""Geolocation model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    ip: str = ""
    city: str = ""
    region_name: str = ""
    country_code: str = ""

    @property
    def label(self) -> str:
        parts = [p for p in (self.city, self.region_name, self.country_code) if p]
        if parts:
            return ", ".join(parts)
        return f"{self.latitude:.4f},{self.longitude:.4f}"
