from __future__ import annotations

import re
from urllib.parse import urlsplit

from .errors import InvalidUrl, MalformedUrl, MissingHost, UnsupportedScheme

SCHEMES = ('http', 'https')
URL_REGEX = re.compile(
    r'^https?://[-a-zA-Z0-9@:%._\+~#=]{2,256}\.[a-z]{2,6}\b([-a-zA-Z0-9@:%_\+.~#?&//=]*)$'
)


def check_url(sub_url: str) -> str:
    """Validate a subscription URL and return it lower-cased.

    The whole string is lower-cased, path and query included. Subscription
    links with case-sensitive tokens will not survive this.
    """
    sub_url = sub_url.lower()

    try:
        parts = urlsplit(sub_url)
        # Accessing .port validates the port component
        parts.port
    except ValueError as e:
        raise InvalidUrl(f"URL parse failed: {e}") from e
    if not parts.scheme:
        raise InvalidUrl("URL parse failed: relative URL without a base")

    if parts.scheme not in SCHEMES:
        raise UnsupportedScheme("Only support http or https.")

    if not parts.hostname:
        raise MissingHost("Invalid url without host name.")

    if not URL_REGEX.match(sub_url):
        raise MalformedUrl("Invalid url, please check again.")

    return sub_url
