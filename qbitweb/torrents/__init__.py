"""The torrents/add workflow."""

from .assembler import RequestPayload, TorrentFilePart, assemble
from .descriptor import AddDescriptor, AddDescriptorDraft
from .orchestrator import add_torrents, reconcile
from .sources import RawTorrentFile, TorrentSource, Url

__all__ = [
    "AddDescriptor",
    "AddDescriptorDraft",
    "RawTorrentFile",
    "RequestPayload",
    "TorrentFilePart",
    "TorrentSource",
    "Url",
    "add_torrents",
    "assemble",
    "reconcile",
]
