"""
CID Registry Module.

Binds the on-chain CID registry and decodes its CIDStored events.
"""

from ipfs_storage.core.registry.registry import (
    CIDRecord,
    bind_registry,
    has_function,
    sort_records,
)

__all__ = [
    "CIDRecord",
    "bind_registry",
    "has_function",
    "sort_records",
]
