"""
Contract Deployer
Sends a contract-creation transaction and waits for its inclusion
"""

from dataclasses import dataclass
from typing import Optional
from web3 import Web3
from loguru import logger


class DeploymentError(RuntimeError):
    """Raised when the network rejects or reverts the deployment"""


@dataclass(frozen=True)
class DeploymentResult:
    contract_address: str
    transaction_hash: str
    block_number: Optional[int] = None
    gas_used: Optional[int] = None


class ContractDeployer:
    """
    Deploys a single contract instance from the deployer wallet

    Every call to deploy() creates a new instance at a new address.
    """

    def __init__(self, w3: Web3, wallet_manager, timeout: float = 200):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager for the deployer account
            timeout: Seconds to wait for the transaction receipt
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.timeout = timeout

    def deploy(self, contract_factory) -> DeploymentResult:
        """
        Deploy a contract with no constructor arguments

        Args:
            contract_factory: Contract factory with abi and bytecode

        Returns:
            DeploymentResult
        """
        deployer_address = self.wallet_manager.deployer_address

        balance = self.w3.eth.get_balance(deployer_address)
        if balance == 0:
            raise DeploymentError(
                f"insufficient funds for gas: deployer {deployer_address} has zero balance"
            )

        logger.info(f"Account balance: {self.w3.from_wei(balance, 'ether')} ETH")

        # Gas and fee fields are filled in by web3
        logger.info("Building deployment transaction...")
        transaction = contract_factory.constructor().build_transaction({
            'from': deployer_address,
            'nonce': self.w3.eth.get_transaction_count(deployer_address, 'pending'),
            'chainId': self.w3.eth.chain_id
        })

        logger.info("Signing transaction...")
        signed_tx = self.wallet_manager.sign_transaction(transaction)

        logger.info("Sending deployment transaction...")
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash_hex}")
        logger.info("Waiting for confirmation...")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.timeout)

        if receipt['status'] != 1:
            raise DeploymentError(f"Deployment transaction reverted: {tx_hash_hex}")

        result = DeploymentResult(
            contract_address=Web3.to_checksum_address(receipt['contractAddress']),
            transaction_hash=tx_hash_hex,
            block_number=receipt.get('blockNumber'),
            gas_used=receipt.get('gasUsed')
        )

        logger.success(f"Contract deployed in block {result.block_number} (gas used: {result.gas_used})")
        return result
