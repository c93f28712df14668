from typing import NamedTuple

from app.models.forecast import GridData, OutageResponse, OutageScenario


class OutageProfile(NamedTuple):
    battery_usage: float
    load_shedding: float
    emergency_mode: bool
    recovery_minutes: int


OUTAGE_PROFILES: dict[OutageScenario, OutageProfile] = {
    OutageScenario.NORMAL:       OutageProfile(0.3, 0.0, False, 0),
    OutageScenario.MINOR_OUTAGE: OutageProfile(0.7, 0.2, False, 15),
    OutageScenario.MAJOR_OUTAGE: OutageProfile(1.0, 0.5, True,  120),
    OutageScenario.GRID_FAILURE: OutageProfile(1.0, 0.8, True,  480),
}


def simulate_outage_response(grid_data: GridData, scenario: OutageScenario) -> OutageResponse:
    """Slår upp batteri/lastfrånkoppling för scenariot och räknar fram kvarvarande last."""
    profile = OUTAGE_PROFILES[OutageScenario(scenario)]

    return OutageResponse(
        **grid_data.model_dump(),
        battery_usage=profile.battery_usage,
        load_shedding=profile.load_shedding,
        emergency_mode=profile.emergency_mode,
        adapted_load=grid_data.current_load * (1.0 - profile.load_shedding),
        estimated_recovery_minutes=profile.recovery_minutes,
    )
