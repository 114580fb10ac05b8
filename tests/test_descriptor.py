"""Tests for AddDescriptor and its draft builder."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from qbitweb.errors import DraftConsumedError, TorrentsNotSet
from qbitweb.torrents.descriptor import (
    AddDescriptor,
    AddDescriptorDraft,
    normalize_root_folder,
    partition_sources,
)
from qbitweb.torrents.sources import RawTorrentFile, Url


MAGNET_A = "magnet:?xt=urn:btih:aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
MAGNET_B = "magnet:?xt=urn:btih:bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"


def test_partition_keeps_order_within_each_kind():
    """Test that urls and paths keep their relative input order."""
    sources = [
        Url(MAGNET_A),
        RawTorrentFile("/tmp/a.torrent"),
        Url(MAGNET_B),
        RawTorrentFile("/tmp/b.torrent"),
        Url("https://example.org/c.torrent"),
    ]

    urls, paths = partition_sources(sources)

    assert urls == (MAGNET_A, MAGNET_B, "https://example.org/c.torrent")
    assert paths == (Path("/tmp/a.torrent"), Path("/tmp/b.torrent"))
    assert len(urls) + len(paths) == len(sources)


def test_partition_rejects_unknown_source():
    """Test that only Url and RawTorrentFile are accepted."""
    with pytest.raises(TypeError):
        partition_sources(["magnet:?xt=plain-string"])


def test_build_mixed_batch():
    """Test the mixed url/file scenario."""
    descriptor = AddDescriptor.new(
        [Url(MAGNET_A), RawTorrentFile("/tmp/a.torrent"), Url(MAGNET_B)]
    )

    assert descriptor.urls == (MAGNET_A, MAGNET_B)
    assert descriptor.paths == (Path("/tmp/a.torrent"),)


def test_build_empty_batch_fails():
    """Test that an empty batch never yields a descriptor."""
    with pytest.raises(TorrentsNotSet):
        AddDescriptor.new([])

    with pytest.raises(TorrentsNotSet):
        AddDescriptorDraft(None).build()


def test_model_rejects_empty_sources():
    """Test that the model itself enforces the non-empty invariant."""
    with pytest.raises(TorrentsNotSet):
        AddDescriptor(urls=(), paths=())


@pytest.mark.parametrize(
    "value, expected",
    [(None, "unset"), (True, "true"), (False, "false")],
)
def test_normalize_root_folder(value, expected):
    """Test the root folder tri-state mapping."""
    assert normalize_root_folder(value) == expected


def test_root_folder_defaults_to_unset():
    """Test that an untouched root folder flag is sent as unset."""
    descriptor = AddDescriptor.new([Url(MAGNET_A)])
    assert descriptor.root_folder == "unset"

    descriptor = AddDescriptor.builder([Url(MAGNET_A)]).root_folder(False).build()
    assert descriptor.root_folder == "false"


def test_builder_sets_every_option():
    """Test that the fluent setters end up on the descriptor."""
    descriptor = (
        AddDescriptor.builder([Url(MAGNET_A)])
        .savepath("/downloads")
        .cookie("uid=1")
        .category("tv")
        .tags(["hd", "weekly"])
        .skip_checking(True)
        .paused(False)
        .root_folder(True)
        .rename("Show")
        .up_limit(1024)
        .dl_limit(2048)
        .ratio_limit(1.5)
        .seeding_time_limit(60)
        .auto_tmm(False)
        .sequential_download(True)
        .first_last_piece_prio(True)
        .build()
    )

    assert descriptor.savepath == "/downloads"
    assert descriptor.cookie == "uid=1"
    assert descriptor.category == "tv"
    assert descriptor.tags == "hd,weekly"
    assert descriptor.skip_checking is True
    assert descriptor.paused is False
    assert descriptor.root_folder == "true"
    assert descriptor.rename == "Show"
    assert descriptor.up_limit == 1024
    assert descriptor.dl_limit == 2048
    assert descriptor.ratio_limit == 1.5
    assert descriptor.seeding_time_limit == 60
    assert descriptor.auto_tmm is False
    assert descriptor.sequential_download is True
    assert descriptor.first_last_piece_prio is True


def test_unset_options_stay_none():
    """Test that options not set on the draft are None."""
    descriptor = AddDescriptor.new([Url(MAGNET_A)])

    assert descriptor.tags is None
    assert descriptor.savepath is None
    assert descriptor.up_limit is None


def test_draft_builds_once():
    """Test that a draft is consumed by build()."""
    draft = AddDescriptor.builder([Url(MAGNET_A)])
    draft.build()

    with pytest.raises(DraftConsumedError):
        draft.build()


def test_descriptor_is_immutable():
    """Test that a finalized descriptor cannot be changed."""
    descriptor = AddDescriptor.new([Url(MAGNET_A)])

    with pytest.raises(ValidationError):
        descriptor.category = "movies"


def test_tags_plain_string_is_one_tag():
    """Test that a string passed to tags() is not split into characters."""
    descriptor = AddDescriptor.builder([Url(MAGNET_A)]).tags("hd,weekly").build()
    assert descriptor.tags == "hd,weekly"

    descriptor = AddDescriptor.builder([Url(MAGNET_A)]).tags("hd").build()
    assert descriptor.tags == "hd"


def test_tags_from_any_iterable():
    """Test that tags accept a tuple or generator as well as a list."""
    descriptor = AddDescriptor.builder([Url(MAGNET_A)]).tags(("hd", "weekly")).build()
    assert descriptor.tags == "hd,weekly"

    descriptor = AddDescriptor.builder([Url(MAGNET_A)]).tags(t for t in ["x", "y"]).build()
    assert descriptor.tags == "x,y"
