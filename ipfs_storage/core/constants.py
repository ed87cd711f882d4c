"""
Default table for the plugin configuration.

These values are only ever used as ``PluginConfig`` defaults; plugin code
reads the resolved configuration, never these module globals.
"""

# =============================================================================
# Plugin
# =============================================================================

# Attribute name the plugin is exposed under on the host
DEFAULT_NAMESPACE = "IPFSStorage"

# =============================================================================
# IPFS
# =============================================================================

DEFAULT_IPFS_API_URL = "http://localhost:5001"
DEFAULT_IPFS_TIMEOUT = 30.0  # seconds

# =============================================================================
# Registry (Sepolia deployment)
# =============================================================================

REGISTRY_ADDRESS = "0xa683bf985bc560c5dc99e8f33f3340d1e53736eb"
REGISTRY_DEPLOYMENT_BLOCK = 4546549

STORE_FUNCTION = "store"
CID_STORED_EVENT = "CIDStored"

REGISTRY_ABI = [
    {
        "anonymous": False,
        "inputs": [
            {
                "indexed": True,
                "internalType": "address",
                "name": "owner",
                "type": "address",
            },
            {
                "indexed": False,
                "internalType": "string",
                "name": "cid",
                "type": "string",
            },
        ],
        "name": CID_STORED_EVENT,
        "type": "event",
    },
    {
        "inputs": [
            {"internalType": "string", "name": "cid", "type": "string"},
        ],
        "name": STORE_FUNCTION,
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]
