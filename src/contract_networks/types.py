"""Data types and dataclasses for contract-networks library."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from .constants import DEFAULT_TIMEOUT_BLOCKS

if TYPE_CHECKING:
    from .providers import HDWalletProvider


@dataclass(frozen=True)
class NetworkProfile:
    """Connection parameters for a single network."""

    # Required fields
    id: str  # e.g., "mainnet"
    chain_id: int  # EIP-155 chain id

    # Remote networks
    rpc_endpoint_template: Optional[str] = None  # may contain {infura_key}
    gas_limit: Optional[int] = None
    gas_price: Optional[int] = None  # wei
    confirmations_required: int = 0
    timeout_blocks: int = DEFAULT_TIMEOUT_BLOCKS
    skip_dry_run: bool = False

    # Local networks
    host: Optional[str] = None
    port: Optional[int] = None

    provider_factory: Optional[Callable[[], "HDWalletProvider"]] = field(
        default=None, compare=False, repr=False
    )

    @property
    def is_local(self) -> bool:
        """True for networks reached by host/port rather than a signing provider."""
        return self.rpc_endpoint_template is None and self.host is not None

    @property
    def needs_infura_key(self) -> bool:
        return self.rpc_endpoint_template is not None and "{infura_key}" in self.rpc_endpoint_template

    @property
    def rpc_url(self) -> Optional[str]:
        """Endpoint of a local network; None for remote networks."""
        if not self.is_local:
            return None
        return f"http://{self.host}:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without secrets; endpoint templates stay unfilled."""
        if self.is_local:
            return {"host": self.host, "port": self.port, "network_id": self.chain_id}

        data: Dict[str, Any] = {
            "rpc_endpoint": self.rpc_endpoint_template,
            "network_id": self.chain_id,
        }
        if self.gas_limit is not None:
            data["gas"] = self.gas_limit
        if self.gas_price is not None:
            data["gasPrice"] = self.gas_price
        data["confirmations"] = self.confirmations_required
        data["timeoutBlocks"] = self.timeout_blocks
        data["skipDryRun"] = self.skip_dry_run
        return data


@dataclass(frozen=True)
class SecretMaterial:
    """Secrets read from the environment. Values never appear in repr()."""

    mnemonic: Optional[str] = field(default=None, repr=False)
    infura_key: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class CompilerDirective:
    """Solidity compiler version and optimizer settings."""

    version: str  # e.g., "0.7.6"
    optimizer_enabled: bool = False
    optimizer_runs: int = 200

    def solc_settings(self) -> Dict[str, Any]:
        """
        Build the `settings` fragment of a solc standard-JSON input.

        Returns:
            {"optimizer": {"enabled": ..., "runs": ...}}
        """
        return {
            "optimizer": {
                "enabled": self.optimizer_enabled,
                "runs": self.optimizer_runs,
            }
        }
