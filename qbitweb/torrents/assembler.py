"""Render an AddDescriptor into multipart request payloads."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..errors import TorrentFilePathError
from .descriptor import AddDescriptor


TORRENT_PART_NAME = "torrents"
TORRENT_FILENAME = "torrent_file.torrent"
TORRENT_MIME_TYPE = "application/x-bittorrent"

# Descriptor attribute -> form field name, in the order fields are sent
SETTING_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("savepath", "savepath"),
    ("cookie", "cookie"),
    ("category", "category"),
    ("tags", "tags"),
    ("skip_checking", "skip_checking"),
    ("paused", "paused"),
    ("root_folder", "root_folder"),
    ("rename", "rename"),
    ("up_limit", "upLimit"),
    ("dl_limit", "dlLimit"),
    ("ratio_limit", "ratioLimit"),
    ("seeding_time_limit", "seedingTimeLimit"),
    ("auto_tmm", "autoTMM"),
    ("sequential_download", "sequentialDownload"),
    ("first_last_piece_prio", "firstLastPiecePrio"),
)


@dataclass(frozen=True)
class TorrentFilePart:
    """One .torrent file attached to a payload."""

    content: bytes
    filename: str = TORRENT_FILENAME
    content_type: str = TORRENT_MIME_TYPE


@dataclass(frozen=True)
class RequestPayload:
    """A multipart body ready to be posted to ``torrents/add``."""

    fields: Dict[str, str] = field(default_factory=dict)
    files: Tuple[TorrentFilePart, ...] = ()

    def to_multipart(self) -> List[Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]]:
        """
        Build the ``files=`` argument for httpx.

        Text fields are sent as parts without a filename so the body is
        multipart/form-data even when no file is attached.
        """
        parts: List[Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]] = [
            (name, (None, value.encode("utf-8"), None))
            for name, value in self.fields.items()
        ]
        for part in self.files:
            parts.append((TORRENT_PART_NAME, (part.filename, part.content, part.content_type)))
        return parts


def render_value(value) -> str:
    """Render a setting the way qBittorrent parses it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_settings(descriptor: AddDescriptor) -> Dict[str, str]:
    """Render every optional setting that is present on the descriptor."""
    fields: Dict[str, str] = {}
    for attribute, name in SETTING_FIELDS:
        value = getattr(descriptor, attribute)
        if value is not None:
            fields[name] = render_value(value)
    return fields


def render_url_payload(descriptor: AddDescriptor) -> Optional[RequestPayload]:
    """
    Render the payload for the descriptor's urls.

    The urls are joined with no separator between them.

    Returns:
        The payload, or None if the descriptor has no urls
    """
    if not descriptor.urls:
        return None

    fields = {"urls": "".join(descriptor.urls)}
    fields.update(render_settings(descriptor))
    return RequestPayload(fields=fields)


def read_torrent_file(path) -> TorrentFilePart:
    """
    Read one .torrent file into memory.

    Raises:
        TorrentFilePathError: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as e:
        raise TorrentFilePathError(path, e.strerror) from e
    return TorrentFilePart(content=content)


def render_file_payload(descriptor: AddDescriptor) -> Optional[RequestPayload]:
    """
    Render the payload for the descriptor's local .torrent files.

    Files are read one at a time; a single unreadable file aborts the whole
    payload.

    Returns:
        The payload, or None if the descriptor has no paths

    Raises:
        TorrentFilePathError: If any file cannot be read
    """
    if not descriptor.paths:
        return None

    files = tuple(read_torrent_file(path) for path in descriptor.paths)
    return RequestPayload(fields=render_settings(descriptor), files=files)


def assemble(
    descriptor: AddDescriptor,
) -> Tuple[Optional[RequestPayload], Optional[RequestPayload]]:
    """Return ``(file_payload, url_payload)`` for the descriptor."""
    return render_file_payload(descriptor), render_url_payload(descriptor)
