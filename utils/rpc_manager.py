"""
RPC Manager
Single JSON-RPC client bound to the configured network profile
"""

from typing import List, Optional
from urllib.parse import urlparse
from web3 import Web3
from loguru import logger

from blockchain.network_config import NetworkProfile


def endpoint_secrets(rpc_url: str) -> List[str]:
    """
    Parts of an RPC URL that may carry credentials

    Hosted providers put the API key in the path (Infura: /v3/<key>),
    some in the query string or in user:password@.
    """
    parsed = urlparse(rpc_url)

    secrets = [parsed.query, parsed.password, parsed.username]
    if len(parsed.path) > 1:
        secrets.append(parsed.path[1:])

    return [secret for secret in secrets if secret]


class RPCManager:
    """
    Owns the Web3 instance for the lifetime of the process
    """

    def __init__(self, profile: NetworkProfile):
        """
        Initialize RPC Manager

        Args:
            profile: Network profile (endpoint and request timeout)
        """
        self.profile = profile

        self.w3 = Web3(Web3.HTTPProvider(
            profile.rpc_url,
            request_kwargs={'timeout': profile.request_timeout}
        ))

        logger.info(f"RPC Manager initialized for {profile.name} ({self.endpoint_host})")

    @property
    def endpoint_host(self) -> str:
        """Endpoint host only; the full URL may carry an API key"""
        return urlparse(self.profile.rpc_url).hostname or 'unknown host'

    def connect(self) -> Web3:
        """
        Verify the endpoint is reachable

        Returns:
            Web3 instance
        """
        if not self.w3.is_connected():
            raise ConnectionError(
                f"Failed to connect to {self.profile.name} RPC endpoint at {self.endpoint_host}"
            )

        logger.success(f"Connected to {self.profile.name}")
        return self.w3

    def get_web3(self) -> Web3:
        """Get Web3 instance"""
        return self.w3

    def is_healthy(self) -> bool:
        """
        Check if the RPC endpoint answers

        Returns:
            True if healthy
        """
        try:
            return self.w3.is_connected()
        except Exception:
            return False

    def get_chain_id(self) -> Optional[int]:
        """Chain id reported by the endpoint"""
        try:
            return self.w3.eth.chain_id
        except Exception as e:
            logger.error(f"Error getting chain id: {e}")
            return None

    def get_block_number(self) -> Optional[int]:
        """Latest block number"""
        try:
            return self.w3.eth.block_number
        except Exception as e:
            logger.error(f"Error getting block number: {e}")
            return None
