"""
tests/test_adaptation.py

Väder-/tidsmultiplikatorer och indelning av dygnet.
"""

import pytest
from datetime import datetime

from app.core.adaptation import adapt_to_weather, time_of_day
from app.models.forecast import BaseValues, TimeOfDay, WeatherCondition

BASE = BaseValues(solar=10.0, demand=20.0, price=4.0)


class TestTimeOfDay:
    @pytest.mark.parametrize("hour,minute,expected", [
        (6, 0,   TimeOfDay.MORNING),
        (11, 59, TimeOfDay.MORNING),
        (12, 0,  TimeOfDay.NOON),
        (15, 59, TimeOfDay.NOON),
        (16, 0,  TimeOfDay.EVENING),
        (19, 59, TimeOfDay.EVENING),
        (20, 0,  TimeOfDay.NIGHT),
        (3, 0,   TimeOfDay.NIGHT),
        (5, 59,  TimeOfDay.NIGHT),
        (0, 0,   TimeOfDay.NIGHT),
    ])
    def test_gransvarden(self, hour, minute, expected):
        assert time_of_day(datetime(2025, 1, 8, hour, minute)) == expected


class TestAdaptToWeather:
    def test_ingen_sol_pa_natten_oavsett_vader(self):
        for weather in WeatherCondition:
            result = adapt_to_weather(BASE, weather, TimeOfDay.NIGHT)
            assert result.solar == 0.0

    def test_storm_natt_ger_exakt_noll(self):
        result = adapt_to_weather(BaseValues(solar=15.3, demand=1, price=1),
                                  WeatherCondition.STORMY, TimeOfDay.NIGHT)
        assert result.solar == 0

    def test_sol_mitt_pa_dagen(self):
        """sunny × noon = (1.2 × 1.0, 1.1 × 0.8) = (1.2, 0.88)"""
        result = adapt_to_weather(BASE, WeatherCondition.SUNNY, TimeOfDay.NOON)
        assert result.solar == pytest.approx(10.0 * 1.2)
        assert result.demand == pytest.approx(20.0 * 0.88)

    def test_regnig_kvall(self):
        result = adapt_to_weather(BASE, WeatherCondition.RAINY, TimeOfDay.EVENING)
        assert result.solar == pytest.approx(10.0 * 0.3 * 0.6)
        assert result.demand == pytest.approx(20.0 * 0.9 * 1.3)

    def test_deterministisk(self):
        a = adapt_to_weather(BASE, WeatherCondition.CLOUDY, TimeOfDay.MORNING)
        b = adapt_to_weather(BASE, WeatherCondition.CLOUDY, TimeOfDay.MORNING)
        assert a == b

    def test_okant_varde_faller_tillbaka_till_sunny_noon(self):
        fallback = adapt_to_weather(BASE, WeatherCondition.SUNNY, TimeOfDay.NOON)
        assert adapt_to_weather(BASE, "foggy", "dusk") == fallback
