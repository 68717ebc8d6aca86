"""CLI entry point for skycast."""

import argparse
import logging

from skycast.config.loader import get_config_value, load_config
from skycast.config.schema import LocationConfig, OutputConfig, SkycastConfig
from skycast.ingest.feed_parser import parse_civil, parse_meteo
from skycast.ingest.forecast_fetcher import ForecastFetcher
from skycast.ingest.ipstack_client import IpStackClientError
from skycast.ingest.seventimer_client import SevenTimerClientError
from skycast.merge.combiner import ForecastMergeError, combine
from skycast.models.timestamp import MalformedTimestampError
from skycast.pipeline.forecast_pipeline import (
    ForecastPipeline,
    build_seventimer_client,
    resolve_location,
)
from skycast.reporting.formatters import format_forecast_text, format_outlook_text
from skycast.storage.forecast_writer import load_feed, write_forecast

DEFAULT_CONFIG = "skycast.yaml"
DEFAULT_ENV_FILE = ".env"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Fetch and merge 7Timer CIVIL and METEO forecasts",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Config YAML path")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE, help=".env file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch, merge and save a forecast")
    fetch_p.add_argument("--output", help="Output JSON path")
    fetch_p.add_argument("--lat", type=float, help="Latitude (skips ipstack)")
    fetch_p.add_argument("--lon", type=float, help="Longitude (skips ipstack)")
    fetch_p.add_argument("--text", action="store_true", help="Print a text summary")
    fetch_p.add_argument("--imperial", action="store_true", help="Use °F in text output")

    # merge
    merge_p = sub.add_parser("merge", help="Merge saved CIVIL and METEO JSON files")
    merge_p.add_argument("civil", help="Saved CIVIL JSON")
    merge_p.add_argument("meteo", help="Saved METEO JSON")
    merge_p.add_argument("--output", help="Output JSON path")
    merge_p.add_argument("--text", action="store_true", help="Print a text summary")
    merge_p.add_argument("--imperial", action="store_true", help="Use °F in text output")

    # outlook
    outlook_p = sub.add_parser("outlook", help="Print the daily CIVIL-light outlook")
    outlook_p.add_argument("--lat", type=float, help="Latitude (skips ipstack)")
    outlook_p.add_argument("--lon", type=float, help="Longitude (skips ipstack)")
    outlook_p.add_argument("--imperial", action="store_true", help="Use °F")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. output.path")

    args = parser.parse_args(argv)

    if (getattr(args, "lat", None) is None) != (getattr(args, "lon", None) is None):
        parser.error("--lat and --lon must be given together")

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config, env_file=args.env_file)

    try:
        if args.command == "fetch":
            return _cmd_fetch(config, args)
        elif args.command == "merge":
            return _cmd_merge(config, args)
        elif args.command == "outlook":
            return _cmd_outlook(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
        else:
            parser.print_help()
            return 1
    except (ForecastMergeError, MalformedTimestampError) as e:
        logger.critical("Merge aborted, nothing written: %s", e)
        return 1
    except (IpStackClientError, SevenTimerClientError) as e:
        logger.error("Fetch failed: %s", e)
        return 1


def _with_overrides(config: SkycastConfig, args) -> SkycastConfig:
    update = {}
    if args.lat is not None or args.lon is not None:
        update["location"] = LocationConfig(latitude=args.lat, longitude=args.lon)
    if getattr(args, "output", None):
        update["output"] = OutputConfig(path=args.output, indent=config.output.indent)
    return config.model_copy(update=update) if update else config


def _cmd_fetch(config: SkycastConfig, args) -> int:
    config = _with_overrides(config, args)
    result = ForecastPipeline(config).run()
    if args.text:
        print(format_forecast_text(result.forecast, imperial=args.imperial))
    print(f"Saved {len(result.forecast.dataseries)} data points to {result.output_path}")
    return 0


def _cmd_merge(config: SkycastConfig, args) -> int:
    civil = parse_civil(load_feed(args.civil))
    meteo = parse_meteo(load_feed(args.meteo))
    forecast = combine(civil, meteo, strict_timestamps=config.merge.strict_timestamps)
    path = write_forecast(
        forecast, args.output or config.output.path, indent=config.output.indent
    )
    if args.text:
        print(format_forecast_text(forecast, imperial=args.imperial))
    print(f"Saved {len(forecast.dataseries)} data points to {path}")
    return 0


def _cmd_outlook(config: SkycastConfig, args) -> int:
    config = _with_overrides(config, args)
    location = resolve_location(config)
    fetcher = ForecastFetcher(build_seventimer_client(config))
    outlook = fetcher.fetch_outlook(location)
    print(format_outlook_text(outlook, imperial=args.imperial))
    return 0


def _cmd_config(config: SkycastConfig, args) -> int:
    if args.config_command == "show":
        shown = config
        if config.ipstack.access_key:
            shown = config.model_copy(
                update={"ipstack": config.ipstack.model_copy(update={"access_key": "***"})}
            )
        print(shown.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1
