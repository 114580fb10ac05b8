"""Torrent sources accepted by the add operation."""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict


class Url(BaseModel):
    """A magnet link or an HTTP(S) URL pointing to a .torrent file."""

    model_config = ConfigDict(frozen=True)

    url: str

    def __init__(self, url: str, **data):
        super().__init__(url=url, **data)


class RawTorrentFile(BaseModel):
    """A .torrent file on the local filesystem."""

    model_config = ConfigDict(frozen=True)

    path: Path

    def __init__(self, path: Union[str, Path], **data):
        super().__init__(path=path, **data)


TorrentSource = Union[Url, RawTorrentFile]
