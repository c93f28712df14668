from pydantic import BaseModel, Field
from typing import List, Literal

TradeStatus = Literal["active", "completed", "pending"]


class Trade(BaseModel):
    id: str                # "T12"
    seller: str            # "House 1"
    buyer: str
    amount: float          # kWh
    price: float           # kr/kWh
    timestamp: str         # "14:05", 24h
    status: TradeStatus


class TradeInput(BaseModel):
    amount: float = Field(gt=0)
    price: float = Field(gt=0)
    status: TradeStatus = "active"


class TradeSummary(BaseModel):
    trades: List[Trade]
    market_price: float = Field(alias="marketPrice")
    total_volume: float = Field(alias="totalVolume")
    your_balance: float = Field(alias="yourBalance")

    model_config = {"populate_by_name": True}
