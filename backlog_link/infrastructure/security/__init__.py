# Security Package
from .crypto import CryptoService

__all__ = ["CryptoService"]
