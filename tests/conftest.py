"""
Shared fixtures for plugin tests.

The web3 instance is real but never reaches a node: its provider's
make_request is replaced so any RPC attempt is recorded instead of sent.
Registry writes and event queries go through a mock contract.
"""

from unittest.mock import AsyncMock

import pytest
from web3 import AsyncHTTPProvider, AsyncWeb3

from ipfs_storage.core.ipfs import AddResult, IPFSClient
from ipfs_storage.plugin import IPFSStoragePlugin, register_plugin
from tests.helpers import ACCOUNT, HELLO_CID, make_contract, make_receipt


@pytest.fixture
def w3():
    """AsyncWeb3 whose provider records instead of sending requests."""
    web3 = AsyncWeb3(AsyncHTTPProvider("http://127.0.0.1:8545"))
    web3.provider.make_request = AsyncMock(side_effect=AssertionError("unexpected RPC call"))
    web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=make_receipt())
    return web3


@pytest.fixture
def ipfs_client():
    client = AsyncMock(spec=IPFSClient)
    client.add.return_value = AddResult(cid=HELLO_CID, name="file", size=19)
    return client


@pytest.fixture
def plugin(w3, ipfs_client):
    """Plugin registered on ``w3`` with a mock registry and a signer set."""
    plugin = IPFSStoragePlugin(ipfs_client=ipfs_client)
    register_plugin(w3, plugin)
    plugin.registry_contract = make_contract()
    w3.eth.default_account = ACCOUNT
    return plugin
