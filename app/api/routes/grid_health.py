import logging
import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_rng
from app.models.forecast import GridHealthView
from app.services.forecast_service import get_grid_health

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/grid-health", tags=["grid-health"])


@router.get("", response_model=GridHealthView)
def read_grid_health(rng: np.random.Generator = Depends(get_rng)):
    """
    Matarutnyttjande, status och ev. avbrottsinfo.
    Varje anrop drar nytt väder och scenario — inget delat tillstånd.
    """
    try:
        return get_grid_health(rng)
    except Exception as e:
        logger.error(f"Nätstatus misslyckades: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate grid health data")
