"""
Attribute documents stored inside a display string.

:class:`Document` wraps a single host string (typically a member nickname)
and exposes the attributes embedded in it. Every operation re-decodes the
string instead of keeping a parsed copy around; host strings are short and
this keeps the string as the only source of truth.

:class:`DocumentHandle` is the shared, lock-guarded cell handed out by the
registry. Hold it with ``async with handle as document:`` before touching the
document so concurrent event handlers serialize on the same member.
"""

from __future__ import annotations

import asyncio
import datetime
import time
from typing import Dict

from . import codec


class Document:
    """Attribute view over one host string."""

    def __init__(self, text: str, delimiter: str = "^") -> None:
        codec.validate_delimiter(delimiter)
        self.text = text
        self._delimiter = delimiter
        self._last_access = time.monotonic()

    def __repr__(self) -> str:
        return f"Document(text={self.text!r}, delimiter={self._delimiter!r})"

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def touch(self) -> None:
        self._last_access = time.monotonic()

    # ------------------------------------------------------------------ #
    # READ helpers
    # ------------------------------------------------------------------ #

    def exists(self, key: str) -> bool:
        """Return ``True`` if ``delimiter + key`` appears anywhere in the text."""

        self.touch()
        return f"{self._delimiter}{key}" in self.text

    def get(self, key: str) -> str | None:
        """Return the value of the first token for ``key``, or ``None``."""

        if not self.exists(key):
            return None
        return codec.find_value(self.text, key, self._delimiter)

    def attributes(self) -> Dict[str, str]:
        """Return a fresh copy of every decoded attribute."""

        self.touch()
        return codec.decode(self.text, self._delimiter)

    def time_since_last_access(self) -> datetime.timedelta:
        return datetime.timedelta(seconds=time.monotonic() - self._last_access)

    # ------------------------------------------------------------------ #
    # WRITE helpers
    # ------------------------------------------------------------------ #

    def set(self, key: str, value: str, *, overwrite: bool = True) -> None:
        """
        Store ``value`` under ``key``.

        An existing attribute is replaced unless ``overwrite`` is ``False``, in
        which case the call leaves the text alone. Raises ``ValueError`` when
        ``key``/``value`` could not be decoded back from the text.
        """

        self.touch()
        codec.validate_key(key)
        codec.validate_value(value, self._delimiter)

        attributes = codec.decode(self.text, self._delimiter)
        if not overwrite and key in attributes:
            return
        attributes[key] = value
        self.text = codec.encode(self.text, attributes, self._delimiter)

    def delete(self, key: str, value: str | None = None) -> None:
        """
        Remove the attribute stored under ``key``.

        With ``value`` given the attribute is only removed when it currently
        holds exactly that value. Missing keys are a no-op.
        """

        if not self.exists(key):
            return

        attributes = codec.decode(self.text, self._delimiter)
        if key not in attributes:
            return
        if value is not None and attributes[key] != value:
            return

        del attributes[key]
        self.text = codec.encode(self.text, attributes, self._delimiter)


class DocumentHandle:
    """Lock-guarded cell sharing one :class:`Document` between callers."""

    def __init__(self, document: Document) -> None:
        self._document = document
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> Document:
        await self._lock.acquire()
        return self._document

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

    def locked(self) -> bool:
        """Return ``True`` while some caller holds the document."""

        return self._lock.locked()

    @property
    def document(self) -> Document:
        """Expose the wrapped document (callers must hold the lock to mutate)."""

        return self._document
