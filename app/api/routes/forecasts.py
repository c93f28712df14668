import logging
import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_rng
from app.models.forecast import ForecastBundle
from app.services.forecast_service import get_forecasts

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/forecasts", tags=["forecasts"])


@router.get("", response_model=ForecastBundle)
def read_forecasts(rng: np.random.Generator = Depends(get_rng)):
    """Sol-, efterfrågan- och prisprognos med väder- och avbrottsanpassning."""
    try:
        return get_forecasts(rng)
    except Exception as e:
        logger.error(f"Prognos misslyckades: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate forecasts")
