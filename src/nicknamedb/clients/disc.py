"""
discord.py glue for the document registry.

A bot registers one :class:`DocumentRegistry` on its client at startup::

    client = discord.Client(intents=discord.Intents.default())
    register_nicknamedb(client, "^")

Event handlers then fetch a member's document from the member's current
display name and write the updated text back themselves::

    handle = await get_document(client, member)
    async with handle as document:
        document.set("p", "he/him")
        new_nick = document.text
    await member.edit(nick=new_nick)
"""

from __future__ import annotations

import logging

import discord

from nicknamedb.document import DocumentHandle
from nicknamedb.registry import DocumentRegistry, Identity

logger = logging.getLogger(__name__)

_CLIENT_ATTR = "nicknamedb"


def register_nicknamedb(client: discord.Client, delimiter: str | None = None) -> DocumentRegistry:
    """Attach a registry to ``client``, reusing one that is already there."""

    existing = get_registry(client)
    if existing is not None:
        if delimiter is not None and delimiter != existing.delimiter:
            logger.warning(
                "nicknamedb already registered with delimiter %r; ignoring %r",
                existing.delimiter,
                delimiter,
            )
        return existing

    registry = DocumentRegistry(delimiter)
    setattr(client, _CLIENT_ATTR, registry)
    logger.info("Registered nicknamedb with delimiter %r", registry.delimiter)
    return registry


def get_registry(client: discord.Client) -> DocumentRegistry | None:
    """Return the registry attached to ``client``, if any."""

    registry = getattr(client, _CLIENT_ATTR, None)
    if isinstance(registry, DocumentRegistry):
        return registry
    return None


def member_identity(member: discord.Member) -> Identity:
    return Identity(user_id=member.id, guild_id=member.guild.id)


async def get_document(
    source: discord.Client | DocumentRegistry, member: discord.Member
) -> DocumentHandle:
    """Return the shared document for ``member`` built from its display name."""

    registry = source if isinstance(source, DocumentRegistry) else get_registry(source)
    if registry is None:
        raise RuntimeError("nicknamedb is not registered on this client")
    return await registry.get_or_create(member_identity(member), member.display_name)


__all__ = [
    "register_nicknamedb",
    "get_registry",
    "member_identity",
    "get_document",
]
