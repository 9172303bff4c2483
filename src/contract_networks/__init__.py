"""
contract-networks: deployment network, compiler and build-directory configuration
for smart contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .config import DeploymentConfig, load_config
from .exceptions import (
    ChainIdMismatchError,
    ConfigError,
    MissingSecretError,
    NetworkNotFoundError,
    ProviderError,
    ProviderNotConfiguredError,
)
from .providers import HDWalletProvider
from .types import CompilerDirective, NetworkProfile, SecretMaterial

try:
    __version__ = version("contract-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentConfig",
    "load_config",
    "HDWalletProvider",
    "NetworkProfile",
    "SecretMaterial",
    "CompilerDirective",
    "ConfigError",
    "NetworkNotFoundError",
    "MissingSecretError",
    "ProviderNotConfiguredError",
    "ChainIdMismatchError",
    "ProviderError",
]
