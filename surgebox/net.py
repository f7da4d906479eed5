from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .common import debug
from .constants import FETCH_TIMEOUT, USER_AGENT
from .errors import FetchError, MalformedSubscription


def _timeout() -> Optional[int]:
    return FETCH_TIMEOUT or None


def fetch_subscription(sub_url: str, session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """GET the subscription and decode it as a JSON object."""
    http = session or requests
    try:
        resp = http.get(sub_url, headers={'User-Agent': USER_AGENT, 'Accept': '*/*'}, timeout=_timeout())
    except requests.RequestException as e:
        raise FetchError(f"Error fetching subscription: {e}") from e

    debug(f"GET {sub_url} -> {resp.status_code}")
    # 2xx only, 3xx included in the failures
    if not 200 <= resp.status_code < 300:
        raise FetchError(
            f"Error fetching subscription: HTTP {resp.status_code} {resp.reason or ''}".rstrip(),
            status=resp.status_code,
        )

    try:
        data = resp.json()
    except ValueError as e:
        raise MalformedSubscription(f"Subscription is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedSubscription(
            f"Subscription must be a JSON object, got {type(data).__name__}"
        )
    return data
