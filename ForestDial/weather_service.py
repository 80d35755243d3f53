"""Weather service: live fetch with mock fallback."""
import logging
import random
from datetime import datetime
from typing import Optional
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import FetchResult, Mock, WeatherCode
from mock_weather import generate_mock_condition


class WeatherService:
    """
    Service that wraps a weather provider with a mock fallback.

    Each call makes one fresh fetch attempt. There is no retry and no cache:
    a failed fetch routes straight to the mock generator for that tick.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        rng: Optional[random.Random] = None,
        snow_variant: bool = True
    ):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            rng: Random source for the mock generator (seed it for reproducible output)
            snow_variant: Passed to the mock generator
        """
        self.provider = provider
        self.rng = rng if rng is not None else random.Random()
        self.snow_variant = snow_variant

    def fetch(self) -> FetchResult:
        """
        Make one live fetch attempt.

        Never raises: provider errors and unexpected exceptions alike become
        a failed result.

        Returns:
            FetchResult: The weather code, or the reason the fetch failed
        """
        try:
            weather = self.provider.fetch_weather_code()
        except WeatherProviderError as e:
            logging.warning(f"Weather fetch failed: {e}")
            return FetchResult.failure(str(e))
        except Exception as e:
            logging.exception(f"Unexpected error from {self.provider.name}: {e}")
            return FetchResult.failure(f"Unexpected error: {e}")
        logging.info(f"Weather fetch successful: code {weather.code}")
        return FetchResult.success(weather)

    def mock(self, instant: datetime) -> Mock:
        """Generate a mock condition for the instant's month and hour."""
        condition = generate_mock_condition(
            instant.month,
            instant.hour,
            rng=self.rng,
            snow_variant=self.snow_variant,
        )
        logging.info(f"Using mock weather: {condition.value}")
        return Mock(condition)

    def resolve(self, instant: datetime) -> WeatherCode:
        """
        Get the weather to display at the given instant.

        Returns:
            WeatherCode: Live Coded value, or a Mock condition if the fetch failed
        """
        result = self.fetch()
        if result.ok:
            return result.weather
        return self.mock(instant)
