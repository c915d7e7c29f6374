from .model import Document, DocumentHandle
from . import codec

__all__ = ["Document", "DocumentHandle", "codec"]
