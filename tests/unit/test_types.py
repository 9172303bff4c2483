"""Unit tests for configuration dataclasses."""

import dataclasses

import pytest

from contract_networks.constants import DEFAULT_TIMEOUT_BLOCKS
from contract_networks.types import CompilerDirective, NetworkProfile


class TestNetworkProfile:
    """Test NetworkProfile behavior."""

    def test_local_profile(self):
        profile = NetworkProfile(id="development", chain_id=5777, host="127.0.0.1", port=7545)

        assert profile.is_local
        assert profile.rpc_url == "http://127.0.0.1:7545"
        assert not profile.needs_infura_key

    def test_remote_profile_has_no_local_url(self):
        profile = NetworkProfile(
            id="BSC", chain_id=56, rpc_endpoint_template="https://bsc-dataseed1.binance.org"
        )

        assert not profile.is_local
        assert profile.rpc_url is None
        assert not profile.needs_infura_key

    def test_needs_infura_key_for_templated_endpoint(self):
        profile = NetworkProfile(
            id="mainnet", chain_id=1, rpc_endpoint_template="https://mainnet.infura.io/v3/{infura_key}"
        )

        assert profile.needs_infura_key

    def test_defaults(self):
        profile = NetworkProfile(id="x", chain_id=10, rpc_endpoint_template="https://rpc.example.com")

        assert profile.gas_limit is None
        assert profile.gas_price is None
        assert profile.confirmations_required == 0
        assert profile.timeout_blocks == DEFAULT_TIMEOUT_BLOCKS
        assert profile.skip_dry_run is False
        assert profile.provider_factory is None

    def test_is_immutable(self):
        profile = NetworkProfile(id="mainnet", chain_id=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.chain_id = 3

    def test_provider_factory_ignored_in_equality_and_repr(self):
        def factory():
            raise AssertionError("must not be called")

        with_factory = NetworkProfile(id="BSC", chain_id=56, provider_factory=factory)
        without_factory = NetworkProfile(id="BSC", chain_id=56)

        assert with_factory == without_factory
        assert "factory" not in repr(with_factory)

    def test_to_dict_remote_omits_unset_gas(self):
        profile = NetworkProfile(
            id="testnet",
            chain_id=97,
            rpc_endpoint_template="https://data-seed-prebsc-1-s1.binance.org:8545",
            confirmations_required=1,
            timeout_blocks=200,
            skip_dry_run=True,
        )

        assert profile.to_dict() == {
            "rpc_endpoint": "https://data-seed-prebsc-1-s1.binance.org:8545",
            "network_id": 97,
            "confirmations": 1,
            "timeoutBlocks": 200,
            "skipDryRun": True,
        }

    def test_to_dict_local(self):
        profile = NetworkProfile(id="development", chain_id=5777, host="127.0.0.1", port=7545)

        assert profile.to_dict() == {"host": "127.0.0.1", "port": 7545, "network_id": 5777}


class TestCompilerDirective:
    """Test CompilerDirective behavior."""

    def test_solc_settings(self):
        directive = CompilerDirective(version="0.7.6", optimizer_enabled=True, optimizer_runs=500)

        assert directive.solc_settings() == {"optimizer": {"enabled": True, "runs": 500}}

    def test_optimizer_disabled_by_default(self):
        directive = CompilerDirective(version="0.8.20")

        assert directive.solc_settings()["optimizer"]["enabled"] is False
