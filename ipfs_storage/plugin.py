"""
IPFS storage plugin for web3.py.

Uploads files to IPFS and records the resulting CIDs in an on-chain registry
contract, and lists the CIDs an account has recorded.

Usage:
    from web3 import AsyncWeb3, AsyncHTTPProvider
    from ipfs_storage import IPFSStoragePlugin, register_plugin

    w3 = AsyncWeb3(AsyncHTTPProvider("https://rpc.sepolia.org"))
    w3.eth.default_account = "0x..."
    register_plugin(w3, IPFSStoragePlugin(ipfs_api_url="http://localhost:5001"))

    receipt = await w3.IPFSStorage.upload_local_file_to_ipfs("report.pdf")
    cids = await w3.IPFSStorage.list_cids_for_address("0x...")
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from web3 import AsyncWeb3, Web3
from web3.types import TxReceipt

from ipfs_storage.core.config import PluginConfig, make_config
from ipfs_storage.core.constants import CID_STORED_EVENT, STORE_FUNCTION
from ipfs_storage.core.errors import (
    ContractMethodMissing,
    InvalidInput,
    NamespaceConflict,
    NoSignerConfigured,
    PluginNotLinked,
    RegistryQueryFailed,
    RegistryWriteFailed,
    StorageUploadFailed,
)
from ipfs_storage.core.ipfs import IPFSClient
from ipfs_storage.core.registry import CIDRecord, bind_registry, has_function, sort_records
from ipfs_storage.core.sources import FileSource, read_file_source
from ipfs_storage.utils.logger import get_logger

logger = get_logger("plugin")


@runtime_checkable
class StoragePlugin(Protocol):
    """Capabilities a storage plugin exposes on its host."""

    plugin_namespace: str

    def link(self, w3: AsyncWeb3) -> None: ...

    async def upload_local_file_to_ipfs(self, source: FileSource) -> TxReceipt: ...

    async def store_cid_in_registry(self, cid: str) -> TxReceipt: ...

    async def list_cids_for_address(
        self, address: str, start_block: Optional[int] = None
    ) -> List[str]: ...


class IPFSStoragePlugin:
    """
    Bridges local files to IPFS and their CIDs to the registry contract.

    The plugin owns its IPFS client. The host connection and its default
    account are borrowed from the AsyncWeb3 instance the plugin is
    registered on.
    """

    def __init__(
        self,
        config: Optional[PluginConfig] = None,
        *,
        ipfs_client: Optional[IPFSClient] = None,
        **options: Any,
    ):
        """
        Args:
            config: Plugin configuration; defaults are used when omitted
            ipfs_client: Pre-built IPFS client (otherwise built from config)
            **options: PluginConfig fields, by name or camelCase alias,
                applied on top of ``config``
        """
        if config is None or options:
            config = make_config(config, **options)
        self.config = config
        self.plugin_namespace = config.plugin_namespace

        if ipfs_client is None:
            ipfs_client = IPFSClient(
                api_url=config.ipfs_api_url,
                auth=config.ipfs_auth,
                timeout=config.ipfs_timeout,
            )
        self.ipfs_client = ipfs_client

        self.w3: Optional[AsyncWeb3] = None
        self.registry_contract = None

    def link(self, w3: AsyncWeb3) -> None:
        """Attach to a host connection and bind the registry contract."""
        self.w3 = w3
        self.registry_contract = bind_registry(w3, self.config)
        logger.info(
            f"{type(self).__name__} linked as '{self.plugin_namespace}', "
            f"registry {self.config.registry_address}"
        )

    def _require_registry(self):
        if self.w3 is None or self.registry_contract is None:
            raise PluginNotLinked(
                f"Plugin '{self.plugin_namespace}' is not registered on a web3 instance."
            )
        return self.registry_contract

    # =========================================================================
    # Upload
    # =========================================================================

    async def upload_local_file_to_ipfs(self, source: FileSource) -> TxReceipt:
        """
        Upload a file to IPFS and store its CID in the registry.

        Args:
            source: Path, byte buffer or blob-like object with read()

        Returns:
            Receipt of the registry store transaction

        Raises:
            InvalidInput: If the source type is not supported
            StorageUploadFailed: If reading the file or the IPFS add fails
            ContractMethodMissing, NoSignerConfigured, RegistryWriteFailed:
                From the registry write
        """
        try:
            data = await read_file_source(source)
            added = await self.ipfs_client.add(data)
        except InvalidInput:
            raise
        except Exception as e:
            logger.error(f"Error during file upload to IPFS: {e!r}")
            raise StorageUploadFailed("Failed to upload file to IPFS.", cause=e) from e

        logger.info(f"Added file CID: {added.cid}")
        return await self.store_cid_in_registry(added.cid)

    # =========================================================================
    # Registry
    # =========================================================================

    async def store_cid_in_registry(self, cid: str) -> TxReceipt:
        """
        Send a ``store(cid)`` transaction from the host's default account.

        One transaction is sent per call; retries are up to the caller.

        Raises:
            PluginNotLinked: If the plugin was never registered
            ContractMethodMissing: If the registry ABI has no store function
            NoSignerConfigured: If the host has no default account
            RegistryWriteFailed: If sending fails or the transaction reverts
        """
        contract = self._require_registry()

        if not has_function(contract.abi, STORE_FUNCTION):
            raise ContractMethodMissing(
                "The store method is not defined in the registry contract."
            )

        account = self.w3.eth.default_account
        if not account:
            raise NoSignerConfigured(
                "No default account configured on the web3 instance."
            )

        try:
            tx_hash = await contract.functions.store(str(cid)).transact({"from": account})
            receipt = await self.w3.eth.wait_for_transaction_receipt(tx_hash)
        except Exception as e:
            logger.error(f"Error storing CID {cid}: {e!r}")
            raise RegistryWriteFailed("Error storing CID in the registry.", cause=e) from e

        if receipt.get("status") == 0:
            logger.error(f"Store transaction for CID {cid} reverted: {receipt}")
            raise RegistryWriteFailed("Store transaction was reverted by the registry.")

        logger.info(f"Stored file CID receipt: {dict(receipt)}")
        return receipt

    async def list_cid_records(
        self, address: str, start_block: Optional[int] = None
    ) -> List[CIDRecord]:
        """
        Fetch the CIDStored events emitted for an account.

        Args:
            address: Account that stored the CIDs
            start_block: First block to scan. Defaults to the registry
                deployment block.

        Returns:
            Records ordered by block number and log index

        Raises:
            RegistryQueryFailed: If the event query fails
        """
        contract = self._require_registry()
        from_block = (
            self.config.registry_deployment_block if start_block is None else start_block
        )

        try:
            event = getattr(contract.events, CID_STORED_EVENT)
            logs = await event.get_logs(
                argument_filters={"owner": Web3.to_checksum_address(address)},
                from_block=from_block,
                to_block="latest",
            )
            records = sort_records(CIDRecord.from_event(log) for log in logs)
        except Exception as e:
            logger.error(f"Error retrieving CIDs for address {address}: {e!r}")
            raise RegistryQueryFailed("Failed to retrieve CIDs.", cause=e) from e

        if not records:
            logger.info(f"No CIDs found for address {address}.")
        else:
            logger.info(f"CIDs stored by address {address}:")
            for record in records:
                logger.info(f"  {record.cid}")

        return records

    async def list_cids_for_address(
        self, address: str, start_block: Optional[int] = None
    ) -> List[str]:
        """
        List the CIDs an account stored in the registry.

        Returns:
            CID strings in emission order; empty when none were found
        """
        records = await self.list_cid_records(address, start_block)
        return [record.cid for record in records]

    async def aclose(self) -> None:
        """Close the IPFS client."""
        await self.ipfs_client.aclose()


def register_plugin(w3: AsyncWeb3, plugin: StoragePlugin) -> StoragePlugin:
    """
    Register a plugin on a web3 instance under its namespace.

    Raises:
        NamespaceConflict: If the namespace is already taken on the host
    """
    namespace = plugin.plugin_namespace
    if hasattr(w3, namespace):
        raise NamespaceConflict(f"web3 instance already has an attribute '{namespace}'.")

    plugin.link(w3)
    setattr(w3, namespace, plugin)
    return plugin
