"""Dispatch of add requests and reconciliation of their outcomes."""

import asyncio
from typing import Any, Optional, Protocol

from ..errors import (
    AddFailure,
    CompositeError,
    InvalidDescriptorError,
    NetworkError,
    TransportError,
)
from ..utils.logger import logger
from .assembler import RequestPayload, assemble
from .descriptor import AddDescriptor


ADD_ENDPOINT = "/api/v2/torrents/add"


class AddSession(Protocol):
    """What the orchestrator needs from the HTTP session."""

    async def get_cookie(self) -> str:
        ...

    async def send(self, endpoint: str, payload: RequestPayload, cookie: str) -> Any:
        ...


def is_success(status_code: int) -> bool:
    """Return True for a 2xx status."""
    return 200 <= status_code < 300


def reconcile(files_ok: bool, urls_ok: bool) -> None:
    """
    Combine the outcomes of the torrent-file and url requests.

    Raises:
        CompositeError: Naming which half (or both) failed
    """
    if files_ok and urls_ok:
        return
    if files_ok:
        raise CompositeError(AddFailure.URLS_FAILED)
    if urls_ok:
        raise CompositeError(AddFailure.FILES_FAILED)
    raise CompositeError(AddFailure.BOTH_FAILED)


async def _send_once(session: AddSession, payload: RequestPayload, cookie: str) -> None:
    response = await session.send(ADD_ENDPOINT, payload, cookie)
    if not is_success(response.status_code):
        raise NetworkError(response.status_code)


def _half_succeeded(label: str, outcome: Any) -> bool:
    if isinstance(outcome, TransportError):
        logger.warning(f"Adding {label} failed: {outcome}")
        return False
    if isinstance(outcome, BaseException):
        raise outcome
    if not is_success(outcome.status_code):
        logger.warning(f"Adding {label} failed with status {outcome.status_code}")
        return False
    return True


async def add_torrents(session: AddSession, descriptor: AddDescriptor) -> None:
    """
    Add the torrents described by ``descriptor``.

    Url and torrent-file sources need separate requests. When both are
    present the two requests run concurrently and both are awaited before
    the outcomes are reconciled.

    Args:
        session: Session used to authenticate and send requests
        descriptor: The finalized add descriptor

    Raises:
        TorrentFilePathError: If a torrent file cannot be read (nothing is sent)
        NetworkError: If a single request returns a non-success status
        TransportError: If a single request fails at the transport level
        CompositeError: If either request of a mixed add fails
        InvalidDescriptorError: If the descriptor has no sources at all
    """
    file_payload: Optional[RequestPayload]
    url_payload: Optional[RequestPayload]
    file_payload, url_payload = assemble(descriptor)

    if file_payload is None and url_payload is None:
        raise InvalidDescriptorError("descriptor has neither urls nor torrent files")

    cookie = await session.get_cookie()

    if file_payload is None:
        logger.info(f"Adding {len(descriptor.urls)} torrent url(s)")
        await _send_once(session, url_payload, cookie)
        return

    if url_payload is None:
        logger.info(f"Adding {len(descriptor.paths)} torrent file(s)")
        await _send_once(session, file_payload, cookie)
        return

    logger.info(
        f"Adding {len(descriptor.paths)} torrent file(s) "
        f"and {len(descriptor.urls)} url(s) concurrently"
    )
    files_outcome, urls_outcome = await asyncio.gather(
        session.send(ADD_ENDPOINT, file_payload, cookie),
        session.send(ADD_ENDPOINT, url_payload, cookie),
        return_exceptions=True,
    )

    files_ok = _half_succeeded("torrent files", files_outcome)
    urls_ok = _half_succeeded("urls", urls_outcome)
    reconcile(files_ok, urls_ok)
