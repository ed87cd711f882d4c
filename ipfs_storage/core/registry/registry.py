"""
Registry contract binding.

The registry exposes ``store(string cid)`` and emits
``CIDStored(address indexed owner, string cid)`` for every stored CID.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from web3 import AsyncWeb3

from ipfs_storage.core.config import PluginConfig
from ipfs_storage.utils.logger import get_logger

logger = get_logger("registry")


def bind_registry(w3: AsyncWeb3, config: PluginConfig):
    """
    Bind the registry contract to a host connection.

    Building the contract object is local; no RPC call is made.
    """
    contract = w3.eth.contract(
        address=config.registry_address,
        abi=config.registry_abi,
    )
    logger.debug(f"Registry bound at {config.registry_address}")
    return contract


def has_function(abi: Iterable[Mapping[str, Any]], name: str) -> bool:
    """Whether the ABI declares a function called ``name``."""
    return any(
        entry.get("type", "function") == "function" and entry.get("name") == name
        for entry in abi
    )


def _tx_hash_hex(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value) if value is not None else ""


@dataclass(frozen=True)
class CIDRecord:
    """
    A decoded CIDStored event.

    Attributes:
        owner: Account that stored the CID
        cid: CID string exactly as emitted
        block_number: Block the event was included in
        log_index: Position of the log within the block
        transaction_hash: Hash of the store transaction (0x-prefixed)
    """
    owner: str
    cid: str
    block_number: int
    log_index: int
    transaction_hash: str = ""

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "CIDRecord":
        args: Dict[str, Any] = event["args"]
        return cls(
            owner=args["owner"],
            cid=args["cid"],
            block_number=int(event["blockNumber"]),
            log_index=int(event.get("logIndex", 0)),
            transaction_hash=_tx_hash_hex(event.get("transactionHash")),
        )

    @property
    def position(self) -> tuple:
        return (self.block_number, self.log_index)


def sort_records(records: Iterable[CIDRecord]) -> List[CIDRecord]:
    """Order records by emission: block number, then log index."""
    return sorted(records, key=lambda r: r.position)
