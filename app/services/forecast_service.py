import logging
import numpy as np
from datetime import datetime
from typing import Optional

from app.core.forecast_engine import generate_forecasts
from app.core.grid_health import derive_grid_health
from app.db.supabase import supabase
from app.models.forecast import ForecastBundle, GridHealthView

logger = logging.getLogger(__name__)


def get_forecasts(rng: np.random.Generator, now: Optional[datetime] = None) -> ForecastBundle:
    """Kör prognosmotorn och sparar en sammanfattning (första prognosen)."""
    bundle = generate_forecasts(now, rng)
    _store_forecast_summary(bundle)
    return bundle


def get_grid_health(rng: np.random.Generator, now: Optional[datetime] = None) -> GridHealthView:
    """Ny prognos → nätstatus. Ingen koppling till tidigare anrop."""
    bundle = generate_forecasts(now, rng)
    view = derive_grid_health(bundle, now, rng)
    _store_grid_health(view)
    return view


# ── Persistens ────────────────────────────────────────────────────────────────
# Misslyckad skrivning loggas men stoppar aldrig svaret till klienten.

def _store_forecast_summary(bundle: ForecastBundle) -> Optional[dict]:
    if supabase is None:
        return None

    first = bundle.forecasts[0]
    try:
        row = supabase.table("energy_forecasts").insert({
            "forecast_type": "prediction",
            "current_value": round(first.current, 2),
            "predicted_value": round(first.predicted, 2),
            "confidence": bundle.model_accuracy_percent,
            "weather_condition": bundle.weather_condition.value,
        }).execute()
        return row.data[0] if row.data else None
    except Exception as e:
        logger.error(f"Kunde inte spara prognos: {type(e).__name__}: {e}")
        return None


def _store_grid_health(view: GridHealthView) -> Optional[dict]:
    if supabase is None:
        return None

    try:
        row = supabase.table("grid_health").insert({
            "feeder_utilization": round(view.feeder_utilization_percent, 2),
            "feeder_limit": view.feeder_limit,
            "current_load": round(view.current_load, 2),
            "status": view.status.value,
            "peak_prediction": round(view.peak_prediction, 2),
        }).execute()
        return row.data[0] if row.data else None
    except Exception as e:
        logger.error(f"Kunde inte spara nätstatus: {type(e).__name__}: {e}")
        return None
