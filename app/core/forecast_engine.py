"""
GridShare — prognosmotor för sol, efterfrågan och pris

Detta är INTE en tränad modell. "Confidence" och "accuracy" är fasta
konstanter och anpassningen är tabelluppslag plus slump:

  1. Tid på dygnet ur tidsstämpeln
  2. Väder och avbrottsscenario dras likformigt
  3. Basvärden med jitter runt fasta centra
  4. Väder- och tidsmultiplikatorer (core/adaptation.py)
  5. Avbrottsrespons (core/outage.py)
  6. Tre prognoser: sol, efterfrågan, pris

All slump går via en injicerad numpy Generator — samma seed ger samma
bundle. Motorn håller inget tillstånd mellan anrop, så två anrop i rad kan
rapportera helt olika väder och nätläge.
"""

import logging
import numpy as np
from datetime import datetime, timedelta
from typing import Optional

from app.models.forecast import (
    BaseValues, ForecastBundle, ForecastItem, ForecastType, GridData,
    OutageScenario, TimeOfDay, Trend, WeatherCondition,
)
from app.core.adaptation import adapt_to_weather, time_of_day
from app.core.outage import simulate_outage_response

logger = logging.getLogger(__name__)

# ── Konstanter ────────────────────────────────────────────────────────────────

# Fasta "modellträffsäkerheter" i procent
MODEL_ACCURACY = {
    "solar":   92,
    "demand":  87,
    "weather": 84,
    "outage":  91,   # visas inte, ingår inte i medelvärdet
}

# (center, spread) — värde = center + (r - 0.5) * spread
BASE_SOLAR  = (12.5, 8.0)
BASE_DEMAND = (14.8, 6.0)
BASE_PRICE  = (4.25, 2.0)

SOLAR_JITTER  = 0.3    # ±15 %
DEMAND_JITTER = 0.4    # ±20 %

PRICE_FACTOR_EMERGENCY = 1.5
PRICE_FACTOR_NORMAL    = 1.1

WEATHER_CONDITIONS = list(WeatherCondition)
OUTAGE_SCENARIOS   = list(OutageScenario)


# ── Hjälpfunktioner ───────────────────────────────────────────────────────────

def _jitter(rng: np.random.Generator, center: float, spread: float) -> float:
    return center + (rng.random() - 0.5) * spread


def _pick(rng: np.random.Generator, options: list):
    return options[int(rng.integers(len(options)))]


def get_trend(value: float, tod: TimeOfDay, rng: np.random.Generator) -> Trend:
    """
    Trend per tid på dygnet. value används inte — mitt på dagen är det
    slantsingling.
    """
    if tod in (TimeOfDay.MORNING, TimeOfDay.EVENING):
        return Trend.UP
    if tod == TimeOfDay.NIGHT:
        return Trend.DOWN
    return Trend.UP if rng.random() > 0.5 else Trend.DOWN


def next_timeframe(now: datetime, minutes: int) -> str:
    """Klockslag om `minutes` minuter, 12-timmarsformat: '3:05 PM'."""
    future = now + timedelta(minutes=minutes)
    hour = future.hour % 12 or 12
    return f"{hour}:{future.minute:02d} {'AM' if future.hour < 12 else 'PM'}"


def model_accuracy() -> int:
    """Medel av sol-, efterfrågan- och vädermodellen. Alltid 88."""
    parts = (MODEL_ACCURACY["solar"], MODEL_ACCURACY["demand"], MODEL_ACCURACY["weather"])
    return round(sum(parts) / len(parts))


# ── Huvudfunktion ─────────────────────────────────────────────────────────────

def generate_forecasts(
    now: Optional[datetime] = None,
    rng: Optional[np.random.Generator] = None,
) -> ForecastBundle:
    if now is None:
        now = datetime.now()
    if rng is None:
        rng = np.random.default_rng()

    tod              = time_of_day(now)
    weather          = _pick(rng, WEATHER_CONDITIONS)
    outage_scenario  = _pick(rng, OUTAGE_SCENARIOS)

    base = BaseValues(
        solar=_jitter(rng, *BASE_SOLAR),
        demand=_jitter(rng, *BASE_DEMAND),
        price=_jitter(rng, *BASE_PRICE),
    )

    adapted = adapt_to_weather(base, weather, tod)

    grid_data = GridData(
        current_load=adapted.demand,
        solar_generation=adapted.solar,
        weather_condition=weather,
        outage_scenario=outage_scenario,
    )
    outage = simulate_outage_response(grid_data, outage_scenario)

    if outage.emergency_mode:
        logger.warning(
            f"Nödläge i prognos: {outage_scenario.value}, "
            f"{outage.load_shedding*100:.0f}% last bortkopplad, "
            f"återställning om ~{outage.estimated_recovery_minutes} min"
        )

    solar = ForecastItem(
        type=ForecastType.SOLAR,
        current=adapted.solar,
        predicted=adapted.solar * (1 + (rng.random() - 0.5) * SOLAR_JITTER),
        confidence_percent=MODEL_ACCURACY["solar"],
        timeframe_label=next_timeframe(now, 30),
        trend=get_trend(adapted.solar, tod, rng),
    )

    demand = ForecastItem(
        type=ForecastType.DEMAND,
        current=outage.adapted_load,
        predicted=outage.adapted_load * (1 + (rng.random() - 0.5) * DEMAND_JITTER),
        confidence_percent=MODEL_ACCURACY["demand"],
        timeframe_label=next_timeframe(now, 60),
        trend=get_trend(outage.adapted_load, tod, rng),
    )

    price_factor = PRICE_FACTOR_EMERGENCY if outage.emergency_mode else PRICE_FACTOR_NORMAL
    price = ForecastItem(
        type=ForecastType.PRICE,
        current=base.price,
        predicted=base.price * price_factor,
        confidence_percent=MODEL_ACCURACY["weather"],
        timeframe_label=next_timeframe(now, 45),
        trend=Trend.UP if outage.emergency_mode else Trend.STABLE,
    )

    logger.debug(
        f"Prognos {now.isoformat()}: {tod.value}/{weather.value}/{outage_scenario.value}, "
        f"sol {adapted.solar:.2f} kW, last {outage.adapted_load:.2f} kW"
    )

    return ForecastBundle(
        forecasts=[solar, demand, price],
        weather_condition=weather,
        model_accuracy_percent=model_accuracy(),
        outage_status=outage,
    )
