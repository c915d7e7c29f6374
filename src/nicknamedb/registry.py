"""
Identity-keyed cache of shared attribute documents.

:class:`DocumentRegistry` hands out one :class:`DocumentHandle` per
:class:`Identity` so concurrent handlers for the same member work on the same
document. The platform's display string stays authoritative: a cached handle
is only reused while its text still matches the string the caller just read
from the platform, otherwise the entry is rebuilt from that string.

Idle entries are dropped by :meth:`DocumentRegistry.sweep`, which runs after
every lookup. The sweep samples every ``sweep_stride``-th entry, starting one
slot later on each pass, and skips any document currently held by a caller,
so it never waits and never evicts a document mid-edit. Eviction does not
write anything back; the caller owns persistence.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import datetime
import logging
from typing import Dict

from nicknamedb.config import registry as registry_cfg

from .document import Document, DocumentHandle, codec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Composite cache key: a user within a guild."""

    user_id: int
    guild_id: int


class DocumentRegistry:
    """Process-wide cache mapping identities to shared documents."""

    def __init__(
        self,
        delimiter: str | None = None,
        *,
        idle_timeout: datetime.timedelta | float | None = None,
        sweep_stride: int | None = None,
    ) -> None:
        self.delimiter: str = delimiter if delimiter is not None else registry_cfg.DELIMITER

        if idle_timeout is None:
            idle_timeout = registry_cfg.IDLE_TIMEOUT
        if not isinstance(idle_timeout, datetime.timedelta):
            idle_timeout = datetime.timedelta(seconds=idle_timeout)
        self.idle_timeout: datetime.timedelta = idle_timeout

        self.sweep_stride: int = sweep_stride if sweep_stride is not None else registry_cfg.SWEEP_STRIDE
        if self.sweep_stride < 1:
            raise ValueError("sweep_stride must be >= 1")

        codec.validate_delimiter(self.delimiter)

        self._entries: Dict[Identity, DocumentHandle] = {}
        self._sweep_offset = 0
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identity: object) -> bool:
        return identity in self._entries

    # ------------------------------------------------------------------ #
    # LOOKUP
    # ------------------------------------------------------------------ #

    async def get_or_create(self, identity: Identity, current_text: str) -> DocumentHandle:
        """
        Return the shared handle for ``identity``, rebuilt if stale.

        ``current_text`` is the display string as the platform reports it
        right now. A cached document whose text differs is discarded.
        """

        async with self._lock:
            handle = self._entries.get(identity)

        # Never wait on a document lock while holding the map lock.
        if handle is not None:
            async with handle as document:
                fresh = document.text == current_text
                if fresh:
                    # A hit counts as an access so the sweep below keeps it.
                    document.touch()
            if fresh:
                logger.debug("Document cache hit for %s", identity)
                await self.sweep()
                return handle
            logger.debug("Document for %s is stale; rebuilding from platform text", identity)
        else:
            logger.debug("Document cache miss for %s", identity)

        handle = DocumentHandle(Document(current_text, self.delimiter))
        async with self._lock:
            self._entries[identity] = handle

        await self.sweep()
        return handle

    # ------------------------------------------------------------------ #
    # MAINTENANCE
    # ------------------------------------------------------------------ #

    async def remove(self, identity: Identity) -> None:
        """Drop the cached document for ``identity`` if present."""

        async with self._lock:
            self._entries.pop(identity, None)

    async def sweep(self) -> int:
        """Evict sampled idle documents; return how many were dropped."""

        async with self._lock:
            # Start one slot later each pass.
            offset = self._sweep_offset % self.sweep_stride
            self._sweep_offset = (offset + 1) % self.sweep_stride
            sampled = list(self._entries.items())[offset :: self.sweep_stride]
            evicted = 0
            for identity, handle in sampled:
                # Busy documents are skipped, not waited on.
                if handle.locked():
                    continue
                if handle.document.time_since_last_access() > self.idle_timeout:
                    del self._entries[identity]
                    evicted += 1

        if evicted:
            logger.info(
                "Evicted %d idle document(s); %d remain cached", evicted, len(self._entries)
            )
        return evicted


__all__ = ["Identity", "DocumentRegistry"]
