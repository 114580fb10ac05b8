"""Async client for the qBittorrent WebUI API."""

from .client import QbitApi
from .errors import (
    AddFailure,
    AuthenticationError,
    CompositeError,
    DraftConsumedError,
    InvalidDescriptorError,
    NetworkError,
    QbitError,
    TorrentFilePathError,
    TorrentsNotSet,
    TransportError,
)
from .torrents import AddDescriptor, AddDescriptorDraft, RawTorrentFile, TorrentSource, Url

__all__ = [
    "AddDescriptor",
    "AddDescriptorDraft",
    "AddFailure",
    "AuthenticationError",
    "CompositeError",
    "DraftConsumedError",
    "InvalidDescriptorError",
    "NetworkError",
    "QbitApi",
    "QbitError",
    "RawTorrentFile",
    "TorrentFilePathError",
    "TorrentSource",
    "TorrentsNotSet",
    "TransportError",
    "Url",
]
