from __future__ import annotations

from typing import Optional


class SurgeboxError(Exception):
    """Base for every failure that aborts the conversion pipeline."""


class UrlError(SurgeboxError):
    pass


class InvalidUrl(UrlError):
    pass


class UnsupportedScheme(UrlError):
    pass


class MissingHost(UrlError):
    pass


class MalformedUrl(UrlError):
    pass


class FetchError(SurgeboxError):
    """HTTP or transport failure. ``status`` is None when no response arrived."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class MalformedSubscription(SurgeboxError):
    pass


class MissingInbounds(SurgeboxError):
    pass


class MalformedInbound(SurgeboxError):
    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Malformed inbound #{index}: {reason}")
        self.index = index
        self.reason = reason


class FileWriteError(SurgeboxError):
    pass


class ExecutableNotFound(SurgeboxError):
    pass


class InstallFailed(SurgeboxError):
    pass
