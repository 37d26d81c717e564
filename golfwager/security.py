"""API key check for the HTTP surface."""

from __future__ import annotations

import os
from typing import Set

from fastapi import Header, HTTPException, Query, status

from golfwager.config import get_settings


def _parse_keys(raw: str) -> Set[str]:
    return {key.strip() for key in raw.split(",") if key.strip()}


def load_api_keys() -> Set[str]:
    """Allowed keys from ``API_KEY`` and the comma separated ``GOLFWAGER_API_KEYS``."""

    allowed = _parse_keys(os.getenv("GOLFWAGER_API_KEYS", ""))
    primary = os.getenv("API_KEY")
    if primary:
        allowed.add(primary)
    return allowed


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    api_key_query: str | None = Query(default=None, alias="apiKey"),
) -> str | None:
    """Require a matching API key header when enabled via env."""

    candidate = x_api_key or api_key_query
    if not get_settings().require_api_key:
        return candidate

    allowed_keys = load_api_keys()
    if not allowed_keys or candidate not in allowed_keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid api key",
        )
    return candidate
