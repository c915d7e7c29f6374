"""
Token codec for attributes embedded in free text.

An attribute is written into the host string as a *token*::

    <delimiter><key><value>

``key`` is a single word character (``\\w``) and ``value`` is the maximal,
non-empty run of characters that are neither the delimiter nor whitespace.
Anything in the host string that does not fit that shape (a lone delimiter,
a delimiter followed by a space, and so on) is ordinary text and survives
every rewrite untouched.

The helpers here are pure functions over ``str``. :class:`Document` layers
access tracking on top of them and :mod:`nicknamedb.registry` shares the
resulting documents between callers.
"""

from __future__ import annotations

from functools import lru_cache
import re
from typing import Dict, Iterator, Mapping, Tuple

_KEY_RE = re.compile(r"\w")
_DELIMITER_RE = re.compile(r"[^\w\s]")


@lru_cache(maxsize=None)
def token_pattern(delimiter: str) -> re.Pattern[str]:
    """Return the compiled token regex for ``delimiter``."""

    validate_delimiter(delimiter)
    d = re.escape(delimiter)
    return re.compile(rf"{d}(?P<key>\w)(?P<value>[^{d}\s]+)")


def validate_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or not _DELIMITER_RE.fullmatch(delimiter):
        raise ValueError(
            f"Delimiter must be a single non-word, non-space character, got {delimiter!r}"
        )


def validate_key(key: str) -> None:
    if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
        raise ValueError(f"Key must be a single word character, got {key!r}")


def validate_value(value: str, delimiter: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError("Value must be a non-empty string")
    if delimiter in value or any(ch.isspace() for ch in value):
        raise ValueError(
            f"Value {value!r} may not contain the delimiter {delimiter!r} or whitespace"
        )


def iter_tokens(text: str, delimiter: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` for each token, scanning left to right."""

    for match in token_pattern(delimiter).finditer(text):
        yield match.group("key"), match.group("value")


def find_value(text: str, key: str, delimiter: str) -> str | None:
    """Return the value of the first token carrying ``key``."""

    for token_key, value in iter_tokens(text, delimiter):
        if token_key == key:
            return value
    return None


def decode(text: str, delimiter: str) -> Dict[str, str]:
    """Decode every token in ``text``; on duplicate keys the last one wins."""

    return dict(iter_tokens(text, delimiter))


def strip_tokens(text: str, delimiter: str) -> str:
    return token_pattern(delimiter).sub("", text)


def format_token(key: str, value: str, delimiter: str) -> str:
    return f"{delimiter}{key}{value}"


def encode(text: str, attributes: Mapping[str, str], delimiter: str) -> str:
    """
    Rewrite ``text`` so it carries exactly ``attributes``.

    Existing tokens are removed, the remaining free text is trimmed, and the
    tokens are appended after a single separating space. Token order follows
    the mapping's iteration order and carries no meaning.
    """

    residual = strip_tokens(text, delimiter).strip()
    tokens = "".join(
        format_token(key, value, delimiter) for key, value in attributes.items()
    )
    return f"{residual} {tokens}"


__all__ = [
    "token_pattern",
    "validate_delimiter",
    "validate_key",
    "validate_value",
    "iter_tokens",
    "find_value",
    "decode",
    "strip_tokens",
    "format_token",
    "encode",
]
