# Interfaces Package
from .storage_port import StoragePort

__all__ = ["StoragePort"]
