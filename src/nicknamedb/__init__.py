"""
Attribute documents embedded in Discord display names.

Import from here::

    from nicknamedb import DocumentRegistry, Identity, register_nicknamedb
"""

from .document import Document, DocumentHandle
from .registry import DocumentRegistry, Identity
from .clients import get_document, get_registry, member_identity, register_nicknamedb

__all__ = [
    "Document",
    "DocumentHandle",
    "DocumentRegistry",
    "Identity",
    "get_document",
    "get_registry",
    "member_identity",
    "register_nicknamedb",
]
