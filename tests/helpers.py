"""
Constants and builders shared by plugin tests.
"""

from unittest.mock import AsyncMock, Mock

from web3 import Web3

from ipfs_storage.core.constants import REGISTRY_ABI

ACCOUNT = Web3.to_checksum_address("0x" + "ab" * 20)
OTHER_ACCOUNT = Web3.to_checksum_address("0x" + "cd" * 20)
TX_HASH = bytes.fromhex("ba1e4e45604acbdeb359bd1c893ab57aecf8bfce5402168b90da34f0eee7ba3e")
HELLO_CID = "bafybeibh5r7hnwumx2udt7q2f36xzm4sq2w4kbf7y4obqwe2nk4b7lz6mu"


def make_receipt(status: int = 1) -> dict:
    return {
        "transactionHash": TX_HASH,
        "blockNumber": 4600000,
        "from": ACCOUNT,
        "status": status,
    }


def make_log(cid: str, block_number: int, log_index: int = 0, owner: str = ACCOUNT) -> dict:
    return {
        "args": {"owner": owner, "cid": cid},
        "blockNumber": block_number,
        "logIndex": log_index,
        "transactionHash": TX_HASH,
        "event": "CIDStored",
    }


def make_contract(abi=None, logs=()) -> Mock:
    """Mock registry contract with awaitable transact() and get_logs()."""
    contract = Mock()
    contract.abi = REGISTRY_ABI if abi is None else abi
    contract.functions.store.return_value.transact = AsyncMock(return_value=TX_HASH)
    contract.events.CIDStored.get_logs = AsyncMock(return_value=list(logs))
    return contract
