"""
app/services/trade_service.py

Handelsposter mellan hushåll. Ren CRUD mot tabellen energy_trades plus en
slumpad marknadssammanfattning för dashboarden.
"""

import logging
import numpy as np
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from app.db.supabase import PersistenceUnavailableError, supabase
from app.models.trade import Trade, TradeInput, TradeSummary

logger = logging.getLogger(__name__)

MAX_TRADES_SHOWN = 15

# Demo-ledger: köpare/säljare är fasta tills användarkoppling finns
DEFAULT_SELLER_ID = 1
DEFAULT_BUYER_ID  = 2


def _to_trade(row: dict) -> Trade:
    created = row.get("created_at")
    if isinstance(created, str):
        created = datetime.fromisoformat(created.replace("Z", "+00:00"))
    return Trade(
        id=f"T{row['id']}",
        seller=f"House {row['seller_id']}",
        buyer=f"House {row['buyer_id']}",
        amount=float(row["amount"]),
        price=float(row["price_per_kwh"]),
        timestamp=created.strftime("%H:%M") if created else "",
        status=row.get("status") or "active",
    )


def list_trades(limit: int = 20) -> List[Trade]:
    """Senaste handelsposterna, nyast först. Tom lista utan databas."""
    if supabase is None:
        return []

    try:
        result = supabase.table("energy_trades")\
            .select("*")\
            .order("created_at", desc=True)\
            .limit(limit)\
            .execute()
    except Exception as e:
        logger.error(f"Kunde inte hämta handelsposter: {type(e).__name__}: {e}")
        return []

    trades = []
    for r in result.data:
        try:
            trades.append(_to_trade(r))
        except (ValidationError, KeyError, TypeError, ValueError) as e:
            # Tabellen ägs inte av oss — okänd status eller trasig rad hoppas över
            logger.warning(f"Hoppar över handelspost {r.get('id')}: {type(e).__name__}: {e}")
    return trades


def get_trade_summary(rng: np.random.Generator) -> TradeSummary:
    trades = list_trades()

    market_price = 3.8 + rng.random() * 1.4
    total_volume = sum(t.amount for t in trades if t.status == "completed")
    balance      = 245.80 + (rng.random() - 0.5) * 50

    return TradeSummary(
        trades=trades[:MAX_TRADES_SHOWN],
        market_price=round(market_price, 2),
        total_volume=round(total_volume, 1),
        your_balance=balance,
    )


def save_trade(trade: TradeInput) -> Optional[Trade]:
    """
    Sparar en handelspost. Kastar PersistenceUnavailableError om ingen
    databas finns; returnerar None om skrivningen misslyckas.
    """
    if supabase is None:
        raise PersistenceUnavailableError("Ingen databas konfigurerad — handel kan inte sparas")

    try:
        row = supabase.table("energy_trades").insert({
            "seller_id": DEFAULT_SELLER_ID,
            "buyer_id": DEFAULT_BUYER_ID,
            "amount": trade.amount,
            "price_per_kwh": trade.price,
            "total_price": round(trade.amount * trade.price, 2),
            "status": trade.status,
        }).execute()
        if not row.data:
            return None
        return _to_trade(row.data[0])
    except Exception as e:
        logger.error(f"Kunde inte spara handelspost: {type(e).__name__}: {e}")
        return None
