"""Exceptions raised by the qBittorrent client."""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class QbitError(Exception):
    """Base exception for qBittorrent client errors."""


class TorrentsNotSet(QbitError):
    """Raised when a descriptor is built without any torrent source."""

    def __init__(self, message: str = "at least one torrent url or file must be given"):
        super().__init__(message)


class DraftConsumedError(QbitError):
    """Raised when an already built draft is built again."""


class InvalidDescriptorError(QbitError):
    """Raised when a descriptor holds neither urls nor torrent files."""


class TorrentFilePathError(QbitError):
    """Raised when a local .torrent file cannot be opened or read."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        message = f"cannot read torrent file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NetworkError(QbitError):
    """Raised when a request completes with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"qBittorrent returned status {status_code}")


class TransportError(QbitError):
    """Raised when the HTTP transport fails before a response is received."""


class AuthenticationError(QbitError):
    """Raised when qBittorrent rejects the login."""


class AddFailure(str, Enum):
    """Which half of a mixed add request failed."""

    URLS_FAILED = "something went wrong while adding urls"
    FILES_FAILED = "something went wrong while adding torrent files"
    BOTH_FAILED = "adding both torrent files and urls failed"


class CompositeError(QbitError):
    """Raised when one or both halves of a mixed add request fail."""

    def __init__(self, reason: AddFailure):
        self.reason = reason
        super().__init__(reason.value)
