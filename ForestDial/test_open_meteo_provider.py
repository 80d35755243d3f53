"""Tests for Open-Meteo provider."""
import pytest
import requests
from unittest.mock import Mock, patch
from open_meteo_provider import OpenMeteoProvider, WeatherProviderError, extract_weather_code
from weather_data import Coded


@pytest.fixture
def sample_open_meteo_response():
    """Sample Open-Meteo current conditions response."""
    return {
        "latitude": 40.710335,
        "longitude": -73.99307,
        "generationtime_ms": 0.02,
        "utc_offset_seconds": 0,
        "timezone": "GMT",
        "current_units": {"time": "iso8601", "interval": "seconds", "weather_code": "wmo code"},
        "current": {"time": "2026-01-14T21:00", "interval": 900, "weather_code": 61},
    }


@pytest.fixture
def provider():
    """Create Open-Meteo provider instance."""
    return OpenMeteoProvider(lat=40.71, lon=-74.01)


def ok_response(body):
    response = Mock()
    response.ok = True
    response.status_code = 200
    response.json.return_value = body
    return response


def test_open_meteo_provider_success(provider, sample_open_meteo_response):
    """Test successful API call and parsing."""
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_get.return_value = ok_response(sample_open_meteo_response)

        weather = provider.fetch_weather_code()

        assert weather == Coded(61)
        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"latitude": 40.71, "longitude": -74.01, "current": "weather_code"}
        assert kwargs["timeout"] == 10


def test_open_meteo_provider_legacy_shape(provider):
    """Test the older current_weather response shape."""
    body = {"current_weather": {"temperature": 3.2, "weathercode": 3}}
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_get.return_value = ok_response(body)

        assert provider.fetch_weather_code() == Coded(3)


def test_open_meteo_provider_uses_session():
    """A supplied session is used instead of module-level requests."""
    session = Mock()
    session.get.return_value = ok_response({"current": {"weather_code": 95}})
    provider = OpenMeteoProvider(lat=1.0, lon=2.0, timeout=3, session=session)

    assert provider.fetch_weather_code() == Coded(95)
    session.get.assert_called_once()


def test_open_meteo_provider_http_error(provider):
    """Test handling of HTTP errors."""
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_response = Mock()
        mock_response.ok = False
        mock_response.status_code = 503
        mock_response.text = "Service Unavailable"
        mock_get.return_value = mock_response

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.fetch_weather_code()

        assert "503" in str(exc_info.value)


def test_open_meteo_provider_network_error(provider):
    """Test handling of network errors."""
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection timeout")

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.fetch_weather_code()

        assert "Network error" in str(exc_info.value)


def test_open_meteo_provider_timeout(provider):
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_get.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(WeatherProviderError):
            provider.fetch_weather_code()


def test_open_meteo_provider_invalid_json(provider):
    """Test handling of a body that is not JSON."""
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_response = ok_response(None)
        mock_response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = mock_response

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.fetch_weather_code()

        assert "Failed to parse response" in str(exc_info.value)


def test_open_meteo_provider_missing_code(provider):
    """Test handling of a response without a weather code."""
    with patch('open_meteo_provider.requests.get') as mock_get:
        mock_get.return_value = ok_response({"current": {"time": "2026-01-14T21:00"}})

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.fetch_weather_code()

        assert "missing weather code" in str(exc_info.value)


def test_extract_weather_code_accepts_integral_float():
    assert extract_weather_code({"current": {"weather_code": 3.0}}) == 3


@pytest.mark.parametrize("body", [
    [],
    "sunny",
    {},
    {"current": None},
    {"current": {"weather_code": "61"}},
    {"current": {"weather_code": 2.5}},
    {"current": {"weather_code": True}},
    {"current": {"weather_code": float("nan")}},
])
def test_extract_weather_code_rejects_malformed(body):
    with pytest.raises(WeatherProviderError):
        extract_weather_code(body)
