"""HD wallet signing provider for contract-networks library."""

from typing import Any, Dict, List, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from loguru import logger
from web3 import HTTPProvider, Web3

from .constants import DEFAULT_DERIVATION_PATH
from .exceptions import ChainIdMismatchError, ProviderError

# Fee fields of EIP-1559 transactions; their presence suppresses a default gasPrice
DYNAMIC_FEE_FIELDS = ("maxFeePerGas", "maxPriorityFeePerGas")


class HDWalletProvider:
    """Signs transactions with accounts derived from a mnemonic and sends them over HTTP."""

    def __init__(
        self,
        mnemonic: str,
        rpc_url: str,
        address_index: int = 0,
        num_addresses: int = 1,
        derivation_path: str = DEFAULT_DERIVATION_PATH,
        request_timeout: int = 30,
        chain_id: Optional[int] = None,
        gas_limit: Optional[int] = None,
        gas_price: Optional[int] = None,
    ):
        """
        Derive signer accounts and prepare the HTTP transport.

        No network I/O happens here.

        Args:
            mnemonic: BIP-39 mnemonic phrase
            rpc_url: RPC endpoint URL
            address_index: First account index to derive
            num_addresses: Number of consecutive accounts to derive
            derivation_path: BIP-44 path prefix, index is appended
            request_timeout: HTTP timeout in seconds
            chain_id: EIP-155 chain id applied to every signed transaction
            gas_limit: Default gas for transactions that omit it
            gas_price: Default gas price (wei) for transactions that omit it

        Raises:
            ValueError: If num_addresses < 1
        """
        if num_addresses < 1:
            raise ValueError(f"num_addresses must be at least 1, got {num_addresses}")

        Account.enable_unaudited_hdwallet_features()
        self._accounts: List[LocalAccount] = [
            Account.from_mnemonic(mnemonic, account_path=f"{derivation_path}/{index}")
            for index in range(address_index, address_index + num_addresses)
        ]
        self._by_address: Dict[str, LocalAccount] = {
            account.address: account for account in self._accounts
        }

        self.rpc_url = rpc_url
        self.chain_id = chain_id
        self.gas_limit = gas_limit
        self.gas_price = gas_price
        self.w3 = Web3(HTTPProvider(rpc_url, request_kwargs={"timeout": request_timeout}))

    def __repr__(self) -> str:
        return f"HDWalletProvider(chain_id={self.chain_id}, addresses={self.addresses})"

    @property
    def addresses(self) -> List[str]:
        """Checksummed addresses of the derived accounts, in derivation order."""
        return [account.address for account in self._accounts]

    @property
    def default_account(self) -> LocalAccount:
        return self._accounts[0]

    def get_account(self, address: Optional[str] = None) -> LocalAccount:
        """
        Get a managed account by address (default account if None).

        Raises:
            ProviderError: If the address is malformed or not managed by this provider
        """
        if address is None:
            return self.default_account

        try:
            checksum_address = Web3.to_checksum_address(address)
        except (TypeError, ValueError) as e:
            raise ProviderError(f"Invalid signer address {address!r}: {e}") from e

        account = self._by_address.get(checksum_address)
        if account is None:
            raise ProviderError(f"Address {address} is not managed by this provider")
        return account

    def prepare_transaction(self, tx: Dict[str, Any]) -> Dict[str, Any]:
        """
        Copy a transaction and fill in the network defaults.

        chainId, gas and gasPrice are set from the provider's configuration
        when the transaction omits them. gasPrice is left alone for EIP-1559
        transactions.

        Raises:
            ChainIdMismatchError: If tx carries a chainId other than the provider's
        """
        tx = dict(tx)
        if self.chain_id is not None:
            tx_chain_id = tx.setdefault("chainId", self.chain_id)
            if tx_chain_id != self.chain_id:
                raise ChainIdMismatchError(
                    f"Transaction chainId {tx_chain_id} does not match provider chain id {self.chain_id}"
                )
        if self.gas_limit is not None:
            tx.setdefault("gas", self.gas_limit)
        if self.gas_price is not None and not any(field in tx for field in DYNAMIC_FEE_FIELDS):
            tx.setdefault("gasPrice", self.gas_price)
        return tx

    def sign_transaction(self, tx: Dict[str, Any], address: Optional[str] = None):
        """
        Sign a transaction after filling in the network defaults.

        Args:
            tx: Transaction dict; nonce is required, chainId/gas/gasPrice
                default to the provider's configuration
            address: Signer address (defaults to the first derived account)

        Returns:
            SignedTransaction from eth-account
        """
        account = self.get_account(address)
        return account.sign_transaction(self.prepare_transaction(tx))

    def send_transaction(self, tx: Dict[str, Any], address: Optional[str] = None) -> HexBytes:
        """
        Sign a transaction locally and broadcast it via eth_sendRawTransaction.

        A missing nonce is fetched from the node for the signer account, and
        a missing gas price from eth_gasPrice when the network has no default.

        Returns:
            Transaction hash
        """
        account = self.get_account(address)
        tx = self.prepare_transaction(tx)
        if "nonce" not in tx:
            tx["nonce"] = self.w3.eth.get_transaction_count(account.address)
        if "gasPrice" not in tx and not any(field in tx for field in DYNAMIC_FEE_FIELDS):
            tx["gasPrice"] = self.w3.eth.gas_price

        signed = account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        logger.info("Sent transaction {} from {}", tx_hash.hex(), account.address)
        return tx_hash
