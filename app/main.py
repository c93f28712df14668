import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.routes import forecasts, grid_health, trades

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="GridShare Energy API",
    description="Prognoser, nätstatus och grannhandel för ett lokalt energinät",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

api = APIRouter(prefix="/api")

@api.get("/health")
def api_health():
    """Samma svar som dashboardens gamla backend gav."""
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

api.include_router(forecasts.router)
api.include_router(grid_health.router)
api.include_router(trades.router)
app.include_router(api)

@app.get("/")
def root():
    return {
        "message": "GridShare Energy API is running",
        "api": "/api",
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

@app.get("/health")
def health():
    return {"status": "ok", "service": settings.service_name}


def run() -> None:
    """Startpunkt för `gridshare-api` (se pyproject.toml)."""
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
