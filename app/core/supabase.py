import logging
from functools import lru_cache

from supabase import Client, create_client

from app.core import config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    if not (config.SUPABASE_URL and config.SUPABASE_KEY):
        logger.error("SUPABASE_URL and SUPABASE_KEY must both be set")
    return create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
