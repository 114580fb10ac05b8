"""Description of one "add torrents" operation and its builder."""

from pathlib import Path
from typing import Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import DraftConsumedError, TorrentsNotSet
from .sources import RawTorrentFile, TorrentSource, Url


RootFolder = Literal["unset", "true", "false"]


class AddDescriptor(BaseModel):
    """
    Validated, immutable description of an add operation.

    Create one with ``AddDescriptor.new(sources)`` or, to set options,
    ``AddDescriptor.builder(sources).category("tv").paused(True).build()``.
    """

    model_config = ConfigDict(frozen=True)

    urls: Tuple[str, ...] = ()
    paths: Tuple[Path, ...] = ()

    savepath: Optional[str] = None
    cookie: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = None
    skip_checking: Optional[bool] = None
    paused: Optional[bool] = None
    root_folder: RootFolder = "unset"
    rename: Optional[str] = None
    up_limit: Optional[int] = None
    dl_limit: Optional[int] = None
    ratio_limit: Optional[float] = None
    seeding_time_limit: Optional[int] = None
    auto_tmm: Optional[bool] = None
    sequential_download: Optional[bool] = None
    first_last_piece_prio: Optional[bool] = None

    @model_validator(mode="after")
    def _require_sources(self) -> "AddDescriptor":
        if not self.urls and not self.paths:
            raise TorrentsNotSet()
        return self

    @classmethod
    def new(cls, sources: Iterable[TorrentSource]) -> "AddDescriptor":
        """Build a descriptor with every option left unset."""
        return cls.builder(sources).build()

    @classmethod
    def builder(cls, sources: Iterable[TorrentSource]) -> "AddDescriptorDraft":
        """Start a draft for ``sources``; the batch must not be empty."""
        return AddDescriptorDraft(sources)


def partition_sources(
    sources: Iterable[TorrentSource],
) -> Tuple[Tuple[str, ...], Tuple[Path, ...]]:
    """Split sources into urls and file paths, keeping input order in each."""
    urls: List[str] = []
    paths: List[Path] = []
    for source in sources:
        if isinstance(source, Url):
            urls.append(source.url)
        elif isinstance(source, RawTorrentFile):
            paths.append(source.path)
        else:
            raise TypeError(f"Unsupported torrent source: {source!r}")
    return tuple(urls), tuple(paths)


def normalize_root_folder(value: Optional[bool]) -> RootFolder:
    """Map the optional root folder flag onto qBittorrent's tri-state."""
    if value is None:
        return "unset"
    return "true" if value else "false"


class AddDescriptorDraft:
    """
    Builder for :class:`AddDescriptor`.

    Every setter stores one option and returns the draft, nothing is
    validated until :meth:`build`. A draft can be built once.
    """

    def __init__(self, sources: Optional[Iterable[TorrentSource]]):
        self._sources = list(sources) if sources is not None else None
        self._built = False

        self._savepath: Optional[str] = None
        self._cookie: Optional[str] = None
        self._category: Optional[str] = None
        self._tags: Optional[List[str]] = None
        self._skip_checking: Optional[bool] = None
        self._paused: Optional[bool] = None
        self._root_folder: Optional[bool] = None
        self._rename: Optional[str] = None
        self._up_limit: Optional[int] = None
        self._dl_limit: Optional[int] = None
        self._ratio_limit: Optional[float] = None
        self._seeding_time_limit: Optional[int] = None
        self._auto_tmm: Optional[bool] = None
        self._sequential_download: Optional[bool] = None
        self._first_last_piece_prio: Optional[bool] = None

    def savepath(self, value: str) -> "AddDescriptorDraft":
        """Download folder."""
        self._savepath = value
        return self

    def cookie(self, value: str) -> "AddDescriptorDraft":
        """Cookie sent to download the .torrent file."""
        self._cookie = value
        return self

    def category(self, value: str) -> "AddDescriptorDraft":
        self._category = value
        return self

    def tags(self, value: Union[str, Iterable[str]]) -> "AddDescriptorDraft":
        """Tags for the torrents; a plain string is taken as one tag."""
        self._tags = [value] if isinstance(value, str) else list(value)
        return self

    def skip_checking(self, value: bool) -> "AddDescriptorDraft":
        """Skip hash checking."""
        self._skip_checking = value
        return self

    def paused(self, value: bool) -> "AddDescriptorDraft":
        """Add torrents in the paused state."""
        self._paused = value
        return self

    def root_folder(self, value: bool) -> "AddDescriptorDraft":
        """Create the root folder; left unset, qBittorrent's default applies."""
        self._root_folder = value
        return self

    def rename(self, value: str) -> "AddDescriptorDraft":
        self._rename = value
        return self

    def up_limit(self, value: int) -> "AddDescriptorDraft":
        """Upload speed limit in bytes/second."""
        self._up_limit = value
        return self

    def dl_limit(self, value: int) -> "AddDescriptorDraft":
        """Download speed limit in bytes/second."""
        self._dl_limit = value
        return self

    def ratio_limit(self, value: float) -> "AddDescriptorDraft":
        self._ratio_limit = value
        return self

    def seeding_time_limit(self, value: int) -> "AddDescriptorDraft":
        """Seeding time limit in minutes."""
        self._seeding_time_limit = value
        return self

    def auto_tmm(self, value: bool) -> "AddDescriptorDraft":
        """Use Automatic Torrent Management."""
        self._auto_tmm = value
        return self

    def sequential_download(self, value: bool) -> "AddDescriptorDraft":
        self._sequential_download = value
        return self

    def first_last_piece_prio(self, value: bool) -> "AddDescriptorDraft":
        """Prioritize downloading the first and last pieces."""
        self._first_last_piece_prio = value
        return self

    def build(self) -> AddDescriptor:
        """
        Finalize the draft.

        Returns:
            The validated AddDescriptor

        Raises:
            TorrentsNotSet: If no torrent source was given
            DraftConsumedError: If the draft was already built
        """
        if self._built:
            raise DraftConsumedError("draft has already been built")
        if not self._sources:
            raise TorrentsNotSet()

        urls, paths = partition_sources(self._sources)
        self._built = True

        return AddDescriptor(
            urls=urls,
            paths=paths,
            savepath=self._savepath,
            cookie=self._cookie,
            category=self._category,
            tags=",".join(self._tags) if self._tags is not None else None,
            skip_checking=self._skip_checking,
            paused=self._paused,
            root_folder=normalize_root_folder(self._root_folder),
            rename=self._rename,
            up_limit=self._up_limit,
            dl_limit=self._dl_limit,
            ratio_limit=self._ratio_limit,
            seeding_time_limit=self._seeding_time_limit,
            auto_tmm=self._auto_tmm,
            sequential_download=self._sequential_download,
            first_last_piece_prio=self._first_last_piece_prio,
        )
