"""Supabase client construction and environment configuration."""
import logging
import os
from threading import Lock
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client

from src.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REGISTRATIONS_TABLE = "registrations"
SETTINGS_TABLE = "webinar_settings"

_ENV_LOADED = False
_ENV_LOCK = Lock()

_client: Optional[Client] = None
_CLIENT_LOCK = Lock()


def load_env() -> None:
    """Load settings from .env once per process. Real environment variables win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(override=False)
        _ENV_LOADED = True


def get_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_KEY is not set
    """
    global _client

    if _client is not None:
        return _client

    with _CLIENT_LOCK:
        if _client is not None:
            return _client

        load_env()
        url = os.getenv("SUPABASE_URL", "").strip()
        key = os.getenv("SUPABASE_KEY", "").strip()
        if not url or not key:
            raise ConfigurationError("SUPABASE_URL and SUPABASE_KEY must be set")

        logger.info("Creating Supabase client for %s", url)
        _client = create_client(url, key)
        return _client


def _reset_client() -> None:
    """Drop the cached client."""
    global _client
    _client = None
