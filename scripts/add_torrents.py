#!/usr/bin/env python3
"""Add magnet links and .torrent files to qBittorrent from the command line."""

import asyncio
import sys
from pathlib import Path

from qbitweb import AddDescriptor, QbitApi, QbitError, RawTorrentFile, Url
from qbitweb.utils.config import settings
from qbitweb.utils.logger import logger, setup_logging


def parse_sources(args):
    """Treat existing paths as .torrent files and everything else as urls."""
    return [RawTorrentFile(arg) if Path(arg).is_file() else Url(arg) for arg in args]


async def main():
    """Add every torrent given on the command line."""
    setup_logging()

    if len(sys.argv) < 2:
        logger.error("Usage: add_torrents.py <magnet|url|file.torrent>...")
        sys.exit(1)

    logger.info(f"Adding torrents to {settings.qbittorrent_url}")

    try:
        descriptor = AddDescriptor.new(parse_sources(sys.argv[1:]))

        async with QbitApi() as api:
            await api.torrents_add_torrent(descriptor)

        logger.info(
            f"Added {len(descriptor.urls)} url(s) and {len(descriptor.paths)} file(s)"
        )

    except QbitError as e:
        logger.error(f"Adding torrents failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
