"""
Väder- och tidsanpassning av basvärden.

Två oberoende uppslagstabeller (väder × tid på dygnet) multipliceras på
basvärdena. Ingen slump i själva anpassningen — samma bas ger samma svar.
"""

from datetime import datetime
from typing import NamedTuple

from app.models.forecast import BaseValues, TimeOfDay, WeatherAdapted, WeatherCondition


class Multiplier(NamedTuple):
    solar: float
    demand: float


WEATHER_MULTIPLIERS: dict[WeatherCondition, Multiplier] = {
    WeatherCondition.SUNNY:  Multiplier(solar=1.2, demand=1.1),
    WeatherCondition.CLOUDY: Multiplier(solar=0.6, demand=1.0),
    WeatherCondition.RAINY:  Multiplier(solar=0.3, demand=0.9),
    WeatherCondition.STORMY: Multiplier(solar=0.1, demand=0.8),
}

TIME_MULTIPLIERS: dict[TimeOfDay, Multiplier] = {
    TimeOfDay.MORNING: Multiplier(solar=0.4, demand=0.7),
    TimeOfDay.NOON:    Multiplier(solar=1.0, demand=0.8),
    TimeOfDay.EVENING: Multiplier(solar=0.6, demand=1.3),
    TimeOfDay.NIGHT:   Multiplier(solar=0.0, demand=0.6),   # ingen sol på natten
}


def time_of_day(now: datetime) -> TimeOfDay:
    """[6,12) morgon, [12,16) mitt på dagen, [16,20) kväll, annars natt."""
    hour = now.hour
    if 6 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 16:
        return TimeOfDay.NOON
    if 16 <= hour < 20:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def adapt_to_weather(base: BaseValues, weather, tod) -> WeatherAdapted:
    """
    Skalar sol och efterfrågan med väder- och tidsmultiplikator.
    Okänt väder/tid faller tillbaka till sunny/noon.
    """
    w = WEATHER_MULTIPLIERS.get(weather, WEATHER_MULTIPLIERS[WeatherCondition.SUNNY])
    t = TIME_MULTIPLIERS.get(tod, TIME_MULTIPLIERS[TimeOfDay.NOON])

    return WeatherAdapted(
        solar=base.solar * w.solar * t.solar,
        demand=base.demand * w.demand * t.demand,
    )
