"""
IPFS storage client.

Adds content to an IPFS node over its HTTP API and returns the CID.
"""

from ipfs_storage.core.ipfs.client import AddResult, IPFSClient, IPFSResponseError

__all__ = ["AddResult", "IPFSClient", "IPFSResponseError"]
