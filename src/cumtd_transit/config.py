"""
Configuration for the CUMTD client.

Values come from environment variables so the API key never has to be
passed on the command line.
"""

import os
from typing import Optional

from .core.endpoints import DEFAULT_BASE_URL

DEFAULT_TIMEOUT = 30


def get_api_key() -> Optional[str]:
    """
    Get the developer API key from ``CUMTD_API_KEY``.

    Returns:
        API key string or None if not set
    """
    key = os.getenv("CUMTD_API_KEY", "").strip()
    return key or None


def get_base_url() -> str:
    """
    Get the service base URL from ``CUMTD_BASE_URL``.

    Returns:
        Base URL string, the public v2.2 JSON endpoint by default
    """
    return os.getenv("CUMTD_BASE_URL", "").strip() or DEFAULT_BASE_URL


def get_timeout() -> int:
    """
    Get the request timeout in seconds from ``CUMTD_TIMEOUT``.

    Returns:
        Positive timeout; falls back to the default on unparsable values
    """
    raw = os.getenv("CUMTD_TIMEOUT", "").strip()
    try:
        timeout = int(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT
