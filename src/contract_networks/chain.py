"""Chain id probing for contract-networks library."""

from typing import Any

import requests

from .exceptions import ChainIdMismatchError
from .types import NetworkProfile


def _rpc_call(rpc_url: str, method: str, timeout: int) -> Any:
    """
    Make a single JSON-RPC call without parameters.

    Returns:
        The `result` member of the response

    Raises:
        ValueError: If RPC returns an error or no result
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": method,
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        if result.get("result") is None:
            raise ValueError("RPC response missing result")

        return result["result"]

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def fetch_chain_id(rpc_url: str, timeout: int = 30) -> int:
    """
    Ask a node for its chain id via eth_chainId.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Chain id reported by the node

    Raises:
        ValueError: If RPC returns an error or no result
        RuntimeError: If network error occurs
    """
    return int(_rpc_call(rpc_url, "eth_chainId", timeout), 16)


def fetch_network_id(rpc_url: str, timeout: int = 30) -> int:
    """
    Ask a node for its network id via net_version (a decimal string).

    Ganache reports network id 5777 but chain id 1337, so local
    development nodes are identified by this value.
    """
    return int(_rpc_call(rpc_url, "net_version", timeout))


def verify_chain_id(profile: NetworkProfile, rpc_url: str, timeout: int = 30) -> int:
    """
    Check that the node behind rpc_url serves the profile's chain.

    Remote profiles are compared against eth_chainId, local profiles
    against net_version.

    Returns:
        The reported id (equal to profile.chain_id)

    Raises:
        ChainIdMismatchError: If the node reports a different id
    """
    if profile.is_local:
        reported = fetch_network_id(rpc_url, timeout=timeout)
    else:
        reported = fetch_chain_id(rpc_url, timeout=timeout)

    if reported != profile.chain_id:
        raise ChainIdMismatchError(
            f"Network '{profile.id}' expects chain id {profile.chain_id}, "
            f"node reports {reported}"
        )
    return reported
