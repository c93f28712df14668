import numpy as np
from datetime import datetime, timezone
from typing import Optional

from app.models.forecast import (
    ForecastBundle, GridHealthView, GridStatus, OutageInfo, OutageResponse,
)

FEEDER_LIMIT = 60.0
WARNING_SHEDDING = 0.1


def grid_status(outage: OutageResponse) -> GridStatus:
    """critical i nödläge, warning vid mer än 10 % bortkoppling, annars optimal."""
    if outage.emergency_mode:
        return GridStatus.CRITICAL
    if outage.load_shedding > WARNING_SHEDDING:
        return GridStatus.WARNING
    return GridStatus.OPTIMAL


def derive_grid_health(
    bundle: ForecastBundle,
    now: Optional[datetime] = None,
    rng: Optional[np.random.Generator] = None,
) -> GridHealthView:
    """
    Nätstatus ur en prognos-bundle.

    OBS: matarutnyttjandet dras oberoende av lasten och tiden till nästa
    topp är slump (2-7 h) — ingen modell ligger bakom.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if rng is None:
        rng = np.random.default_rng()

    outage = bundle.outage_status
    current_load = outage.adapted_load

    feeder_utilization = 30 + rng.random() * 30
    peak_prediction    = current_load * (1.2 + rng.random() * 0.4)
    hours   = int(2 + rng.random() * 6)
    minutes = int(rng.random() * 60)

    outage_info = None
    if outage.emergency_mode:
        outage_info = OutageInfo(
            scenario=outage.outage_scenario,
            estimated_recovery=f"{outage.estimated_recovery_minutes} minutes",
            battery_usage=f"{round(outage.battery_usage * 100)}%",
        )

    return GridHealthView(
        feeder_utilization_percent=feeder_utilization,
        feeder_limit=FEEDER_LIMIT,
        current_load=current_load,
        status=grid_status(outage),
        peak_prediction=peak_prediction,
        time_to_next_peak=f"{hours}h {minutes}m",
        outage_info=outage_info,
        timestamp=now,
    )
