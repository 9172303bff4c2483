"""Custom exception classes for contract-networks library."""


class ConfigError(Exception):
    """Base exception for deployment configuration errors."""

    pass


class NetworkNotFoundError(ConfigError, ValueError):
    """Raised when requested network is not configured."""

    pass


class MissingSecretError(ConfigError, ValueError):
    """Raised when a required environment variable is not set."""

    pass


class ProviderNotConfiguredError(ConfigError, ValueError):
    """Raised when a signing provider is requested for a local network."""

    pass


class ChainIdMismatchError(ConfigError, ValueError):
    """Raised when a node reports a different chain id than configured."""

    pass


class ProviderError(ConfigError, ValueError):
    """Raised when a signer account is not managed by the provider."""

    pass
