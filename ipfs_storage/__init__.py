"""
IPFS Storage Plugin for web3.py

Uploads files to IPFS and records their CIDs in an on-chain registry:
- File sources: paths, byte buffers, blob-like objects
- IPFS HTTP API client
- CID registry contract binding and CIDStored event lookup
"""

from ipfs_storage.core.config import PluginConfig, load_config, make_config
from ipfs_storage.core.errors import (
    ConfigurationError,
    ContractMethodMissing,
    InvalidInput,
    IPFSStorageError,
    NamespaceConflict,
    NoSignerConfigured,
    PluginNotLinked,
    RegistryQueryFailed,
    RegistryWriteFailed,
    StorageUploadFailed,
)
from ipfs_storage.plugin import IPFSStoragePlugin, StoragePlugin, register_plugin

__version__ = "0.1.0"

__all__ = [
    "IPFSStoragePlugin",
    "StoragePlugin",
    "register_plugin",
    "PluginConfig",
    "load_config",
    "make_config",
    "IPFSStorageError",
    "ConfigurationError",
    "InvalidInput",
    "StorageUploadFailed",
    "ContractMethodMissing",
    "NoSignerConfigured",
    "RegistryWriteFailed",
    "RegistryQueryFailed",
    "PluginNotLinked",
    "NamespaceConflict",
]
