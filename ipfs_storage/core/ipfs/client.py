"""
IPFS HTTP API client.

Talks to a Kubo-compatible node (or a pinning service exposing the same
``/api/v0`` surface). Only content addition is needed by the plugin.
"""

from dataclasses import dataclass
from typing import Dict

import httpx

from ipfs_storage.core.constants import DEFAULT_IPFS_API_URL, DEFAULT_IPFS_TIMEOUT
from ipfs_storage.utils.logger import get_logger

logger = get_logger("ipfs")

ADD_ENDPOINT = "/api/v0/add"


class IPFSResponseError(Exception):
    """The node answered with a body that is not a valid add result."""


@dataclass(frozen=True)
class AddResult:
    """
    Result of adding content to IPFS.

    Attributes:
        cid: Content identifier assigned by the node
        name: Name the node recorded for the upload
        size: Size reported by the node (bytes, including DAG overhead)
    """
    cid: str
    name: str = ""
    size: int = 0

    @classmethod
    def from_response(cls, payload: Dict) -> "AddResult":
        cid = payload.get("Hash") if isinstance(payload, dict) else None
        if not cid:
            raise IPFSResponseError(f"IPFS add response has no Hash: {payload!r}")
        return cls(
            cid=str(cid),
            name=str(payload.get("Name", "")),
            size=int(payload.get("Size", 0) or 0),
        )


class IPFSClient:
    """
    Async client for the IPFS HTTP API.

    One ``httpx.AsyncClient`` is kept for the lifetime of the client so
    connections to the node are reused across uploads.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_IPFS_API_URL,
        auth: str = "",
        timeout: float = DEFAULT_IPFS_TIMEOUT,
    ):
        """
        Args:
            api_url: Base URL of the node's HTTP API
            auth: Authorization header value; omitted when empty
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        headers = {"Authorization": auth} if auth else {}
        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=headers,
            timeout=timeout,
        )

        logger.debug(f"IPFSClient configured for {self.api_url}")

    async def add(self, data: bytes, pin: bool = True) -> AddResult:
        """
        Add content to IPFS.

        Args:
            data: Raw bytes to add
            pin: Whether the node should pin the content

        Returns:
            AddResult with the CID of the content

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses
            IPFSResponseError: If the response carries no CID
        """
        response = await self._client.post(
            ADD_ENDPOINT,
            params={"pin": "true" if pin else "false"},
            files={"file": ("file", data, "application/octet-stream")},
        )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise IPFSResponseError(f"IPFS add response is not JSON: {response.text!r}") from e

        result = AddResult.from_response(payload)
        logger.debug(f"Added {len(data)} bytes as {result.cid}")
        return result

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "IPFSClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
