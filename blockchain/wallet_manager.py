"""
Wallet Manager
Derives the deployer account from the network profile and signs transactions
"""

from typing import Dict
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger

from .network_config import ConfigurationError, NetworkProfile


class WalletManager:
    """
    Holds the single deployer account of a network profile
    """

    def __init__(self, profile: NetworkProfile):
        """
        Initialize wallet manager

        Args:
            profile: Network profile carrying the signing key
        """
        try:
            self.deployer_account = Account.from_key(profile.signing_key)
        except Exception:
            # Do not chain: the original error may echo the key
            raise ConfigurationError(
                f"PRIVATE_KEY for network {profile.name} is not a valid private key"
            ) from None

        self.deployer_address = self.deployer_account.address

        logger.info(f"Deployer wallet: {self.deployer_address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.deployer_account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_balance(self, w3: Web3) -> Decimal:
        """
        Get deployer balance

        Args:
            w3: Web3 instance

        Returns:
            Balance in ether
        """
        balance_wei = w3.eth.get_balance(self.deployer_address)
        return Decimal(str(w3.from_wei(balance_wei, 'ether')))
