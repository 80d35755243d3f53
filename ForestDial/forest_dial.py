"""Forest dial runner: keeps the portfolio page's clock, season and weather widgets fresh."""
import argparse
import logging
import os
import random
import signal
import sys
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from assets import DEFAULT_ASSET_DIR, preview_sheet, verify_assets
from dial import CLOCK_INTERVAL, SEASON_INTERVAL, WEATHER_INTERVAL, ForestDial
from display_targets import (
    DATE_TARGET,
    SEASON_TARGET,
    TIME_TARGET,
    WEATHER_TARGET,
    DisplayTargets,
    LoggingDisplayTarget,
    StateFile,
)
from open_meteo_provider import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, OpenMeteoProvider
from refresh_scheduler import RefreshScheduler
from weather_service import WeatherService

TARGET_NAMES = (TIME_TARGET, DATE_TARGET, SEASON_TARGET, WEATHER_TARGET)


@dataclass
class DialSettings:
    """Settings read from the environment (.env supported)."""
    lat: float = DEFAULT_LATITUDE
    lon: float = DEFAULT_LONGITUDE
    asset_dir: str = DEFAULT_ASSET_DIR
    seed: Optional[int] = None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Forest portfolio clock/season/weather dial")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--state-file", default=None, help="JSON file the page reads; logs writes when omitted")
    parser.add_argument("--asset-dir", default=None, help="Overrides FOREST_DIAL_ASSET_DIR")
    parser.add_argument("--clock-interval", type=float, default=CLOCK_INTERVAL)
    parser.add_argument("--season-interval", type=float, default=SEASON_INTERVAL)
    parser.add_argument("--weather-interval", type=float, default=WEATHER_INTERVAL)
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--legacy-icons", action="store_true", help="No snow icon; simple winter mock split")
    parser.add_argument("--date-with-clock", action="store_true", help="Refresh the date with the clock")
    parser.add_argument("--check-assets", action="store_true", help="Verify image assets and exit")
    parser.add_argument("--preview-sheet", default=None, help="Save a contact sheet of the assets and exit")
    parser.add_argument("--once", action="store_true", help="Write every target once and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_config() -> DialSettings:
    load_dotenv()
    settings = DialSettings()
    lat = os.getenv("FOREST_DIAL_LAT")
    lon = os.getenv("FOREST_DIAL_LON")
    seed = os.getenv("FOREST_DIAL_SEED")

    try:
        if lat:
            settings.lat = float(lat)
        if lon:
            settings.lon = float(lon)
    except ValueError as exc:
        raise SystemExit(f"Invalid coordinates: {exc}") from exc

    if not -90 <= settings.lat <= 90 or not -180 <= settings.lon <= 180:
        raise SystemExit(f"Coordinates out of range: lat={settings.lat} lon={settings.lon}")

    if seed:
        try:
            settings.seed = int(seed)
        except ValueError as exc:
            raise SystemExit(f"Invalid FOREST_DIAL_SEED: {exc}") from exc

    asset_dir = os.getenv("FOREST_DIAL_ASSET_DIR")
    if asset_dir:
        settings.asset_dir = asset_dir
    logging.info("Configuration loaded: lat=%s lon=%s assets=%s", settings.lat, settings.lon, settings.asset_dir)
    return settings


def build_targets(state_file: Optional[str]) -> DisplayTargets:
    if state_file:
        state = StateFile(state_file)
        logging.info("Writing display state to %s", state_file)
        return DisplayTargets({name: state.target(name) for name in TARGET_NAMES})
    return DisplayTargets({name: LoggingDisplayTarget(name) for name in TARGET_NAMES})


def build_dial(settings: DialSettings, args: argparse.Namespace) -> ForestDial:
    provider = OpenMeteoProvider(lat=settings.lat, lon=settings.lon, timeout=args.timeout)
    service = WeatherService(
        provider=provider,
        rng=random.Random(settings.seed),
        snow_variant=not args.legacy_icons,
    )
    dial = ForestDial(
        targets=build_targets(args.state_file),
        weather_service=service,
        asset_dir=settings.asset_dir,
        snow_icon=not args.legacy_icons,
        date_with_clock=args.date_with_clock,
    )
    logging.info("Forest dial ready (snow icon=%s)", dial.snow_icon)
    return dial


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    settings = load_config()
    if args.asset_dir:
        settings.asset_dir = args.asset_dir

    if args.check_assets:
        problems = verify_assets(settings.asset_dir, include_snow=not args.legacy_icons)
        for filename, problem in problems.items():
            logging.error("%s: %s", filename, problem)
        return 1 if problems else 0

    if args.preview_sheet:
        preview_sheet(settings.asset_dir, args.preview_sheet, include_snow=not args.legacy_icons)
        return 0

    dial = build_dial(settings, args)

    if args.once:
        dial.update_all()
        return 0

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    with RefreshScheduler() as scheduler:
        try:
            dial.schedule(
                scheduler,
                clock_interval=args.clock_interval,
                season_interval=args.season_interval,
                weather_interval=args.weather_interval,
            )
            scheduler.run()
        except KeyboardInterrupt:
            logging.info("Stopping dial")
    return 0


if __name__ == "__main__":
    sys.exit(main())
