"""The time, date, season and weather widgets and their refresh cadences."""
import logging
from concurrent.futures import Future
from datetime import datetime
from typing import Callable, Optional

from assets import DEFAULT_ASSET_DIR, asset_path
from clock_format import format_date, format_time
from display_targets import DATE_TARGET, SEASON_TARGET, TIME_TARGET, WEATHER_TARGET, DisplayTargets
from refresh_scheduler import RefreshScheduler
from season import classify_season, season_filename
from weather_classifier import classify_icon
from weather_data import WeatherIcon
from weather_service import WeatherService

CLOCK_INTERVAL = 1
DATE_INTERVAL = 60 * 60
SEASON_INTERVAL = 60 * 60
WEATHER_INTERVAL = 30 * 60


class ForestDial:
    """
    Writes the clock, date, season art and weather icon into display targets.

    Each update method reads the time source once, recomputes its value from
    scratch and writes only its own target, so calling it again is harmless.
    """

    def __init__(
        self,
        targets: DisplayTargets,
        weather_service: WeatherService,
        time_source: Callable[[], datetime] = datetime.now,
        asset_dir: str = DEFAULT_ASSET_DIR,
        snow_icon: bool = True,
        date_with_clock: bool = False
    ):
        self.targets = targets
        self.weather_service = weather_service
        self.time_source = time_source
        self.asset_dir = asset_dir
        self.snow_icon = snow_icon
        self.date_with_clock = date_with_clock
        self.last_weather_future: Optional[Future] = None

    def update_time(self) -> None:
        instant = self.time_source()
        self.targets.set_text(TIME_TARGET, format_time(instant))
        if self.date_with_clock:
            self.targets.set_text(DATE_TARGET, format_date(instant))

    def update_date(self) -> None:
        self.targets.set_text(DATE_TARGET, format_date(self.time_source()))

    def update_season(self) -> None:
        season = classify_season(self.time_source().month)
        self.targets.set_image_source(SEASON_TARGET, asset_path(self.asset_dir, season_filename(season)))
        logging.debug(f"Season: {season.value}")

    def resolve_weather_icon(self, instant: datetime) -> WeatherIcon:
        """Resolve the weather (live or mock) at an instant and classify it."""
        season = classify_season(instant.month)
        weather = self.weather_service.resolve(instant)
        icon = classify_icon(weather, season, snow_icon=self.snow_icon)
        logging.info(f"Weather icon: {icon.value} ({weather})")
        return icon

    def write_weather_icon(self, icon: WeatherIcon) -> None:
        self.targets.set_image_source(WEATHER_TARGET, asset_path(self.asset_dir, icon.filename))

    def update_weather(self) -> WeatherIcon:
        """
        Resolve the weather and write its icon, blocking on the fetch.

        Fetch failures fall back to a mock condition inside the service, so
        this always writes one of the fixed icon files.
        """
        icon = self.resolve_weather_icon(self.time_source())
        self.write_weather_icon(icon)
        return icon

    def refresh_weather(self, scheduler: RefreshScheduler) -> Future:
        """
        Start a weather refresh on the scheduler's background pool.

        The icon is written on the dispatch thread once the fetch returns, so
        a slow network never holds up the clock. Overlapping refreshes are
        fine: whichever finishes last sets the icon.
        """
        instant = self.time_source()
        self.last_weather_future = scheduler.submit(
            lambda: self.resolve_weather_icon(instant),
            self.write_weather_icon,
        )
        return self.last_weather_future

    def update_all(self) -> None:
        """Write every target once."""
        self.update_time()
        self.update_date()
        self.update_season()
        self.update_weather()

    def schedule(
        self,
        scheduler: RefreshScheduler,
        clock_interval: float = CLOCK_INTERVAL,
        season_interval: float = SEASON_INTERVAL,
        weather_interval: float = WEATHER_INTERVAL
    ) -> None:
        """Register every widget on the scheduler; each runs immediately once."""
        scheduler.every("time", clock_interval, self.update_time)
        if not self.date_with_clock:
            scheduler.every("date", DATE_INTERVAL, self.update_date)
        scheduler.every("season", season_interval, self.update_season)
        scheduler.every("weather", weather_interval, lambda: self.refresh_weather(scheduler))
