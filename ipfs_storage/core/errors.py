"""
Error kinds raised by the plugin.

Collaborator failures (file system, IPFS node, JSON-RPC) are caught where an
operation hands off to them and re-raised as one of the kinds below. The
original exception stays reachable through ``cause`` and ``__cause__``.
"""

from typing import Optional


class IPFSStorageError(Exception):
    """Base class for every error raised by the plugin."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(IPFSStorageError):
    """Plugin options failed validation."""


class InvalidInput(IPFSStorageError, TypeError):
    """The file source is not a path, a byte buffer or a blob-like object."""


class StorageUploadFailed(IPFSStorageError):
    """Reading the file or adding it to IPFS failed."""


class ContractMethodMissing(IPFSStorageError):
    """The bound registry ABI does not declare the called function."""


class NoSignerConfigured(IPFSStorageError):
    """The host has no default account to send transactions from."""


class RegistryWriteFailed(IPFSStorageError):
    """The store transaction could not be sent or was reverted."""


class RegistryQueryFailed(IPFSStorageError):
    """Fetching CIDStored events from the registry failed."""


class PluginNotLinked(IPFSStorageError):
    """A chain operation ran before the plugin was registered on a host."""


class NamespaceConflict(IPFSStorageError):
    """The host already exposes an attribute under the plugin namespace."""
