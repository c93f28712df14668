from typing import Optional
from pydantic_settings import BaseSettings
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    # Tomma värden → ingen persistens, API:et kör i fallback-läge
    supabase_url: str = ""
    supabase_key: str = ""
    environment: str = "development"
    log_level: str = "INFO"
    service_name: str = "gridshare-energy-api"
    host: str = "0.0.0.0"
    port: int = 3001

    # Fast seed ger reproducerbara svar (demo/test); None = ny entropi per anrop
    random_seed: Optional[int] = None

    class Config:
        env_file = str(BASE_DIR / ".env")
        extra = "ignore"

settings = Settings()
