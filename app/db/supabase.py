"""
app/db/supabase.py

Valfri Supabase-klient. Saknas SUPABASE_URL/SUPABASE_KEY, eller om klienten
inte går att skapa, är `supabase` None och tjänsterna kör utan persistens
(fallback-läge) — API:et svarar ändå.
"""

import logging
from typing import Optional

from supabase import Client, create_client

from app.config import settings

logger = logging.getLogger(__name__)


class PersistenceUnavailableError(Exception):
    """Ingen databas konfigurerad eller nåbar."""


def _connect() -> Optional[Client]:
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("SUPABASE_URL/SUPABASE_KEY saknas — kör utan persistens")
        return None
    try:
        client = create_client(settings.supabase_url, settings.supabase_key)
        logger.info("Supabase-klient skapad")
        return client
    except Exception as e:
        logger.warning(
            f"Kunde inte skapa Supabase-klient ({type(e).__name__}: {e}) — "
            f"kör utan persistens"
        )
        return None


supabase: Optional[Client] = _connect()
