"""Shared pytest fixtures for contract-networks tests."""

import os
from pathlib import Path
from typing import Dict

import pytest

from contract_networks import DeploymentConfig, load_config
from contract_networks.constants import INFURA_KEY_ENV, MNEMONIC_ENV

# Well-known development mnemonic (hardhat/anvil default accounts)
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_ADDRESSES = [
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
]
TEST_INFURA_KEY = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def test_mnemonic() -> str:
    return TEST_MNEMONIC


@pytest.fixture
def test_addresses():
    return list(TEST_ADDRESSES)


@pytest.fixture
def secret_environ() -> Dict[str, str]:
    """Environment mapping with both deployment secrets set."""
    return {MNEMONIC_ENV: TEST_MNEMONIC, INFURA_KEY_ENV: TEST_INFURA_KEY}


@pytest.fixture
def config(secret_environ: Dict[str, str]) -> DeploymentConfig:
    """Configuration loaded with both secrets available."""
    return load_config(environ=secret_environ)


@pytest.fixture
def config_without_secrets() -> DeploymentConfig:
    """Configuration loaded from an empty environment."""
    return load_config(environ={})


@pytest.fixture
def clean_secret_env(monkeypatch):
    """Remove deployment secrets from os.environ, including any loaded from .env."""
    monkeypatch.delenv(MNEMONIC_ENV, raising=False)
    monkeypatch.delenv(INFURA_KEY_ENV, raising=False)
    yield
    os.environ.pop(MNEMONIC_ENV, None)
    os.environ.pop(INFURA_KEY_ENV, None)


@pytest.fixture
def temp_project_dir(tmp_path: Path) -> Path:
    """Create a temporary project directory holding a .env file."""
    project_dir = tmp_path / "contracts"
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / ".env").write_text(
        f'{MNEMONIC_ENV}="{TEST_MNEMONIC}"\n{INFURA_KEY_ENV}={TEST_INFURA_KEY}\n'
    )
    return project_dir
