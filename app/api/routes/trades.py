import logging
import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_rng
from app.db.supabase import PersistenceUnavailableError
from app.models.trade import Trade, TradeInput, TradeSummary
from app.services.trade_service import get_trade_summary, save_trade

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/trades", tags=["trades"])


@router.get("", response_model=TradeSummary)
def read_trades(rng: np.random.Generator = Depends(get_rng)):
    try:
        return get_trade_summary(rng)
    except Exception as e:
        logger.error(f"Handelssammanfattning misslyckades: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate trades")


@router.post("", response_model=Trade, status_code=201)
def create_trade(trade: TradeInput):
    try:
        stored = save_trade(trade)
    except PersistenceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if stored is None:
        raise HTTPException(status_code=500, detail="Failed to save trade")
    return stored
