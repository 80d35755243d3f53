"""Tests for weather icon selection."""
import pytest
from season import Season
from weather_classifier import classify_icon, icon_filename, icon_for_code, wind_icon
from weather_data import Coded, Mock, MockCondition, WeatherIcon


@pytest.mark.parametrize("season", list(Season))
def test_code_zero_is_sun_in_every_season(season):
    assert classify_icon(Coded(0), season) is WeatherIcon.SUN
    assert classify_icon(Coded(1), season) is WeatherIcon.SUN


def test_partly_cloudy_uses_wind_rule():
    assert classify_icon(Coded(2), Season.SPRING) is WeatherIcon.WIND_SPRING
    assert classify_icon(Coded(3), Season.FALL) is WeatherIcon.WIND_FALL
    assert classify_icon(Coded(2), Season.SUMMER) is WeatherIcon.SUN
    assert classify_icon(Coded(3), Season.WINTER) is WeatherIcon.SUN


@pytest.mark.parametrize("code", [45, 46, 48])
def test_fog_codes_use_wind_rule(code):
    assert classify_icon(Coded(code), Season.SPRING) is WeatherIcon.WIND_SPRING
    assert classify_icon(Coded(code), Season.FALL) is WeatherIcon.WIND_FALL
    assert classify_icon(Coded(code), Season.SUMMER) is WeatherIcon.SUN


@pytest.mark.parametrize("code", [51, 55, 61, 65, 67, 80, 81, 82])
def test_rain_codes(code):
    assert classify_icon(Coded(code), Season.SUMMER) is WeatherIcon.RAIN


@pytest.mark.parametrize("code", [71, 75, 77, 85, 86])
def test_snow_codes(code):
    assert classify_icon(Coded(code), Season.WINTER) is WeatherIcon.SNOW


@pytest.mark.parametrize("code", [71, 75, 77, 85, 86])
def test_snow_codes_collapse_to_rain_without_snow_icon(code):
    assert classify_icon(Coded(code), Season.WINTER, snow_icon=False) is WeatherIcon.RAIN


@pytest.mark.parametrize("code", [95, 96, 97, 99])
def test_storm_codes(code):
    assert classify_icon(Coded(code), Season.SPRING) is WeatherIcon.STORM


@pytest.mark.parametrize("code", [4, 44, 47, 50, 68, 70, 78, 83, 84, 87, 94, 100, -1])
def test_unlisted_codes_default_to_sun(code):
    assert icon_for_code(code, Season.FALL) is WeatherIcon.SUN


def test_mock_clear_is_sun():
    assert classify_icon(Mock(MockCondition.CLEAR), Season.SPRING) is WeatherIcon.SUN


def test_mock_clouds_in_fall_is_wind_fall():
    assert classify_icon(Mock(MockCondition.CLOUDS), Season.FALL) is WeatherIcon.WIND_FALL


@pytest.mark.parametrize("season", list(Season))
def test_mock_thunderstorm_is_storm_regardless_of_season(season):
    assert classify_icon(Mock(MockCondition.THUNDERSTORM), season) is WeatherIcon.STORM


def test_mock_rain_and_drizzle_are_rain():
    assert classify_icon(Mock(MockCondition.RAIN), Season.SUMMER) is WeatherIcon.RAIN
    assert classify_icon(Mock(MockCondition.DRIZZLE), Season.WINTER) is WeatherIcon.RAIN


def test_mock_mist_and_fog_use_wind_rule():
    assert classify_icon(Mock(MockCondition.MIST), Season.SPRING) is WeatherIcon.WIND_SPRING
    assert classify_icon(Mock(MockCondition.FOG), Season.WINTER) is WeatherIcon.SUN


def test_mock_snow():
    assert classify_icon(Mock(MockCondition.SNOW), Season.WINTER) is WeatherIcon.SNOW
    assert classify_icon(Mock(MockCondition.SNOW), Season.WINTER, snow_icon=False) is WeatherIcon.RAIN


def test_unknown_weather_type_rejected():
    with pytest.raises(TypeError):
        classify_icon(61, Season.SUMMER)


def test_wind_icon():
    assert wind_icon(Season.SPRING) is WeatherIcon.WIND_SPRING
    assert wind_icon(Season.FALL) is WeatherIcon.WIND_FALL
    assert wind_icon(Season.SUMMER) is WeatherIcon.SUN


def test_classifier_is_idempotent():
    for code in range(0, 100):
        assert classify_icon(Coded(code), Season.FALL) is classify_icon(Coded(code), Season.FALL)


def test_icon_filename():
    assert icon_filename(WeatherIcon.WIND_SPRING) == "WindSpring.png"
