"""Plain text renderings of forecasts."""

from skycast.models.forecast import SevenDayForecast, WeatherForecast

# 7Timer 10m wind speed classes, indexed by the feed's speed value.
WIND_SPEED_CLASSES = [
    "Undefined / No Data",
    "Below 0.3m/s (calm)",
    "0.3-3.4m/s (light)",
    "3.4-8.0m/s (moderate)",
    "8.0-10.8m/s (fresh)",
    "10.8-17.2m/s (strong)",
    "17.2-24.5m/s (gale)",
    "24.5-32.6m/s (storm)",
    "Over 32.6m/s (hurricane)",
]


def celsius_to_fahrenheit(celsius: int | float) -> int:
    return int(celsius * 1.8 + 32)


def wind_speed_label(speed: int) -> str:
    if 0 <= speed < len(WIND_SPEED_CLASSES):
        return WIND_SPEED_CLASSES[speed]
    return WIND_SPEED_CLASSES[0]


def _temperature(celsius: int, imperial: bool) -> str:
    if imperial:
        return f"{celsius_to_fahrenheit(celsius)}°F"
    return f"{celsius}°C"


def format_forecast_text(forecast: WeatherForecast, imperial: bool = False) -> str:
    """One line per data point, prefixed by a header."""
    lines = [
        f"=== {forecast.product} | Init {forecast.init} | "
        f"{len(forecast.dataseries)} points ==="
    ]
    for p in forecast.dataseries:
        lines.append(
            f"{p.datetime}  {_temperature(p.temp2m, imperial):>6}  "
            f"RH {p.rh2m:>4}  Cloud {p.cloudcover}/9  "
            f"Wind {p.wind10m.direction} {wind_speed_label(p.wind10m.speed)}  "
            f"{p.weather}"
        )
    return "\n".join(lines)


def format_outlook_text(outlook: SevenDayForecast, imperial: bool = False) -> str:
    """Daily outlook, dates rendered MM/DD/YYYY."""
    lines = [f"=== Daily Outlook | Init {outlook.init} ==="]
    for d in outlook.dataseries:
        date = str(d.date)
        lines.append(
            f"{date[4:6]}/{date[6:8]}/{date[0:4]}  "
            f"{d.weather:<12} "
            f"high {_temperature(d.temp2m.max, imperial)} "
            f"low {_temperature(d.temp2m.min, imperial)}  "
            f"max wind {wind_speed_label(d.wind10m_max)}"
        )
    return "\n".join(lines)
