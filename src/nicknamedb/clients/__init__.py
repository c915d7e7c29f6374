from .disc import get_document, get_registry, member_identity, register_nicknamedb

__all__ = ["get_document", "get_registry", "member_identity", "register_nicknamedb"]
