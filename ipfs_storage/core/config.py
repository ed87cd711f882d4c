"""
Plugin configuration.

All plugin options live in one frozen model passed at construction time.
Options are accepted under their Python names (``ipfs_api_url``) or the
camelCase names used by the web3.js plugin (``ipfsApiUrl``).
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from web3 import Web3

from ipfs_storage.core.constants import (
    DEFAULT_IPFS_API_URL,
    DEFAULT_IPFS_TIMEOUT,
    DEFAULT_NAMESPACE,
    REGISTRY_ABI,
    REGISTRY_ADDRESS,
    REGISTRY_DEPLOYMENT_BLOCK,
)
from ipfs_storage.core.errors import ConfigurationError

# Environment variable -> config field
ENV_VARS = {
    "PLUGIN_NAMESPACE": "plugin_namespace",
    "REGISTRY_ADDRESS": "registry_address",
    "REGISTRY_DEPLOYMENT_BLOCK": "registry_deployment_block",
    "IPFS_API_URL": "ipfs_api_url",
    "IPFS_AUTH": "ipfs_auth",
    "IPFS_TIMEOUT": "ipfs_timeout",
}


class PluginConfig(BaseModel):
    """Options for IPFSStoragePlugin"""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    # Host attachment
    plugin_namespace: str = DEFAULT_NAMESPACE

    # Registry contract
    registry_abi: List[Dict[str, Any]] = Field(
        default_factory=lambda: [dict(entry) for entry in REGISTRY_ABI]
    )
    registry_address: str = REGISTRY_ADDRESS
    registry_deployment_block: int = Field(default=REGISTRY_DEPLOYMENT_BLOCK, ge=0)

    # IPFS HTTP API
    ipfs_api_url: str = DEFAULT_IPFS_API_URL
    ipfs_auth: str = ""  # sent verbatim as the Authorization header
    ipfs_timeout: float = Field(default=DEFAULT_IPFS_TIMEOUT, gt=0)

    @field_validator("plugin_namespace")
    @classmethod
    def validate_namespace(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"plugin namespace must be an identifier, got {value!r}")
        return value

    @field_validator("registry_address")
    @classmethod
    def validate_registry_address(cls, value: str) -> str:
        if not Web3.is_address(value):
            raise ValueError(f"invalid registry address: {value!r}")
        return Web3.to_checksum_address(value)

    @field_validator("ipfs_api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"IPFS API URL must be http(s), got {value!r}")
        return value.rstrip("/")


def _field_name(key: str) -> str:
    """Map a camelCase alias to its field name."""
    for name, info in PluginConfig.model_fields.items():
        if key == info.alias:
            return name
    return key


def make_config(base: Optional[PluginConfig] = None, **options: Any) -> PluginConfig:
    """
    Build a validated PluginConfig.

    Args:
        base: Optional config whose values are used for unset options
        **options: PluginConfig fields, by name or camelCase alias

    Returns:
        PluginConfig instance

    Raises:
        ConfigurationError: If any option is invalid
    """
    values: Dict[str, Any] = base.model_dump() if base is not None else {}
    values.update({_field_name(key): value for key, value in options.items()})

    try:
        return PluginConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid plugin configuration: {e}", cause=e) from e


def load_config(env_file: Optional[str] = None, **overrides: Any) -> PluginConfig:
    """
    Load configuration from the environment.

    A .env file is loaded first (without overriding variables that are
    already set), then explicit overrides are applied on top.

    Args:
        env_file: Optional path to a .env file. If None, .env is searched
            for in the working directory and its parents.
        **overrides: PluginConfig fields, by name or camelCase alias

    Returns:
        PluginConfig instance
    """
    if env_file is not None:
        if not Path(env_file).exists():
            raise ConfigurationError(f".env file not found: {env_file}")
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    values: Dict[str, Any] = {}
    for env_var, field_name in ENV_VARS.items():
        if env_var in os.environ:
            values[field_name] = os.environ[env_var]

    values.update({_field_name(key): value for key, value in overrides.items()})
    return make_config(**values)
