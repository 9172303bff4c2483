"""Main API for contract-networks library."""

import dataclasses
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from loguru import logger
from web3 import HTTPProvider, Web3

from .chain import verify_chain_id
from .constants import (
    COMPILER_CONFIG,
    CONTRACTS_BUILD_DIRECTORY,
    DEFAULT_TIMEOUT_BLOCKS,
    INFURA_KEY_ENV,
    MNEMONIC_ENV,
    NETWORK_CONFIG,
)
from .environment import read_secrets, require_secret
from .exceptions import NetworkNotFoundError, ProviderNotConfiguredError
from .paths import get_contracts_build_dir
from .providers import HDWalletProvider
from .types import CompilerDirective, NetworkProfile, SecretMaterial


def _fill_endpoint(profile: NetworkProfile, secrets: SecretMaterial) -> str:
    if not profile.needs_infura_key:
        return profile.rpc_endpoint_template
    return profile.rpc_endpoint_template.format(
        infura_key=require_secret(secrets.infura_key, INFURA_KEY_ENV)
    )


def _make_provider_factory(
    profile: NetworkProfile, secrets: SecretMaterial
) -> Callable[[], HDWalletProvider]:
    # Secrets are checked on invocation, not when the configuration loads
    def provider_factory() -> HDWalletProvider:
        mnemonic = require_secret(secrets.mnemonic, MNEMONIC_ENV)
        rpc_url = _fill_endpoint(profile, secrets)
        logger.info("Creating HD wallet provider for '{}' (chain id {})", profile.id, profile.chain_id)
        return HDWalletProvider(
            mnemonic,
            rpc_url,
            chain_id=profile.chain_id,
            gas_limit=profile.gas_limit,
            gas_price=profile.gas_price,
        )

    return provider_factory


def _build_profile(network_id: str, entry: Dict[str, Any], secrets: SecretMaterial) -> NetworkProfile:
    profile = NetworkProfile(
        id=network_id,
        chain_id=int(entry["chain_id"]),
        rpc_endpoint_template=entry.get("rpc_endpoint"),
        gas_limit=entry.get("gas"),
        gas_price=entry.get("gas_price"),
        confirmations_required=entry.get("confirmations", 0),
        timeout_blocks=entry.get("timeout_blocks", DEFAULT_TIMEOUT_BLOCKS),
        skip_dry_run=entry.get("skip_dry_run", False),
        host=entry.get("host"),
        port=entry.get("port"),
    )
    if profile.rpc_endpoint_template is None:
        return profile
    return dataclasses.replace(profile, provider_factory=_make_provider_factory(profile, secrets))


class DeploymentConfig:
    """Read-only deployment configuration: networks, compiler and build directory."""

    def __init__(
        self,
        networks: Dict[str, NetworkProfile],
        compiler: CompilerDirective,
        contracts_build_directory: str,
        secrets: SecretMaterial,
    ):
        self._networks = dict(networks)
        self._compiler = compiler
        self._contracts_build_directory = contracts_build_directory
        self._secrets = secrets

    @property
    def networks(self) -> Mapping[str, NetworkProfile]:
        return MappingProxyType(self._networks)

    @property
    def compiler(self) -> CompilerDirective:
        return self._compiler

    @property
    def contracts_build_directory(self) -> str:
        """Build directory exactly as configured (relative to the project root)."""
        return self._contracts_build_directory

    def build_directory(self, project_root: Optional[Union[Path, str]] = None) -> Path:
        """Absolute path of the contracts build directory."""
        return get_contracts_build_dir(project_root, self._contracts_build_directory)

    def has_network(self, network: str) -> bool:
        """
        Check if a network is configured.

        Args:
            network: Network name to check (case-sensitive)

        Returns:
            True if network exists, False otherwise
        """
        return network in self._networks

    def network_names(self) -> List[str]:
        """Configured network names in declaration order."""
        return list(self._networks)

    def network(self, network: str) -> NetworkProfile:
        """
        Get the connection profile for a network.

        Args:
            network: Network name (e.g., "mainnet", "BSC")

        Returns:
            NetworkProfile

        Raises:
            NetworkNotFoundError: If network is not configured
        """
        try:
            return self._networks[network]
        except KeyError:
            raise NetworkNotFoundError(
                f"Network '{network}' not found in configuration "
                f"(available: {', '.join(self._networks)})"
            ) from None

    def rpc_url(self, network: str) -> str:
        """
        Resolve the RPC endpoint URL of a network.

        Raises:
            NetworkNotFoundError: If network is not configured
            MissingSecretError: If the endpoint needs $INFURAAPP and it is unset
        """
        profile = self.network(network)
        if profile.is_local:
            return profile.rpc_url
        return _fill_endpoint(profile, self._secrets)

    def provider(self, network: str) -> HDWalletProvider:
        """
        Invoke the provider factory of a remote network.

        Raises:
            NetworkNotFoundError: If network is not configured
            ProviderNotConfiguredError: If network is local
            MissingSecretError: If $MNEMONIC (or $INFURAAPP) is unset
        """
        profile = self.network(network)
        if profile.provider_factory is None:
            raise ProviderNotConfiguredError(
                f"Network '{network}' is reached via {profile.rpc_url} and has no signing provider"
            )
        return profile.provider_factory()

    def web3(self, network: str) -> Web3:
        """Web3 instance for a network; remote networks sign through the HD wallet provider."""
        profile = self.network(network)
        if profile.is_local:
            return Web3(HTTPProvider(profile.rpc_url))
        return self.provider(network).w3

    def verify_chain(self, network: str, timeout: int = 30) -> int:
        """
        Check that the network's node reports the configured chain id.

        The development network id is checked against net_version.

        Returns:
            The reported chain id

        Raises:
            ChainIdMismatchError: If the node serves a different chain
        """
        return verify_chain_id(self.network(network), self.rpc_url(network), timeout=timeout)

    def to_dict(self) -> Dict[str, Any]:
        """
        Secret-free snapshot of the configuration.

        Returns:
            Dictionary with networks, contracts_build_directory and compilers
        """
        return {
            "networks": {name: profile.to_dict() for name, profile in self._networks.items()},
            "contracts_build_directory": self._contracts_build_directory,
            "compilers": {
                "solc": {
                    "version": self._compiler.version,
                    "settings": self._compiler.solc_settings(),
                }
            },
        }


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
) -> DeploymentConfig:
    """
    Build the deployment configuration.

    Missing secrets do not fail here; they fail when a remote network's
    provider factory is invoked.

    Args:
        environ: Explicit environment mapping (skips .env loading)
        dotenv_path: .env location (defaults to ./.env)

    Returns:
        DeploymentConfig
    """
    secrets = read_secrets(environ, dotenv_path)

    networks = {
        network_id: _build_profile(network_id, entry, secrets)
        for network_id, entry in NETWORK_CONFIG.items()
    }
    compiler = CompilerDirective(
        version=COMPILER_CONFIG["version"],
        optimizer_enabled=COMPILER_CONFIG["optimizer"]["enabled"],
        optimizer_runs=COMPILER_CONFIG["optimizer"]["runs"],
    )

    logger.debug("Loaded {} network profiles (solc {})", len(networks), compiler.version)
    return DeploymentConfig(networks, compiler, CONTRACTS_BUILD_DIRECTORY, secrets)
