from __future__ import annotations

import os
from typing import Optional

from . import client as _client
from .client import SirenClient

BASE_URL_ENV = "SIREN_BASE_URL"


def load_env_config(*, use_dotenv: bool = True) -> Optional[str]:
    """Load the API base URL from the environment (optional .env)."""
    if use_dotenv:
        _client.load_dotenv()
    return os.getenv(BASE_URL_ENV, "").strip() or None


def create_client_from_env(**kwargs) -> SirenClient:
    """Create a SirenClient from environment variables.

    An unset base URL is allowed; hrefs are then used as absolute URLs.
    """
    base_url = load_env_config()
    return SirenClient(base_url=base_url, **kwargs)


__all__ = ["BASE_URL_ENV", "load_env_config", "create_client_from_env"]
