"""Configuration constants for contract-networks library."""

# Environment variables holding deployment secrets
INFURA_KEY_ENV = "INFURAAPP"
MNEMONIC_ENV = "MNEMONIC"

# Minimum/default number of blocks before a deployment times out
DEFAULT_TIMEOUT_BLOCKS = 50

# BIP-44 path for Ethereum accounts; the address index is appended
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0"

# Compiled contract ABIs are written here for the client application
CONTRACTS_BUILD_DIRECTORY = "../client/src/abis/"

COMPILER_CONFIG = {
    "version": "0.7.6",
    "optimizer": {
        "enabled": True,
        "runs": 500,
    },
}

# Network registry, in declaration order.
# Remote endpoints are templates; {infura_key} is filled from $INFURAAPP.
NETWORK_CONFIG = {
    "development": {
        "host": "127.0.0.1",
        "port": 7545,
        "chain_id": 5777,
    },
    "mainnet": {
        "rpc_endpoint": "https://mainnet.infura.io/v3/{infura_key}",
        "chain_id": 1,
        "gas": 5500000,
        "gas_price": 87000000000,
        "confirmations": 0,
        "timeout_blocks": 500,
        "skip_dry_run": False,
    },
    "ropsten": {
        "rpc_endpoint": "https://ropsten.infura.io/v3/{infura_key}",
        "chain_id": 3,
        "gas": 5500000,  # lower block limit than mainnet
        "gas_price": 87000000000,
        "confirmations": 0,
        "timeout_blocks": 200,
        "skip_dry_run": True,
    },
    "rinkeby": {
        "rpc_endpoint": "https://rinkeby.infura.io/v3/{infura_key}",
        "chain_id": 4,
        "gas": 5500000,
        "gas_price": 135000000000,
        "confirmations": 0,
        "timeout_blocks": 200,
        "skip_dry_run": True,
    },
    "testnet": {
        "rpc_endpoint": "https://data-seed-prebsc-1-s1.binance.org:8545",
        "chain_id": 97,
        "confirmations": 1,
        "timeout_blocks": 200,
        "skip_dry_run": True,
    },
    "BSC": {
        "rpc_endpoint": "https://bsc-dataseed1.binance.org",
        "chain_id": 56,
        "confirmations": 1,
        "timeout_blocks": 200,
        "skip_dry_run": True,
    },
}
