"""
Blockchain Interaction Package
Handles network configuration, the deployer wallet, contract artifacts and deployment
"""

from .network_config import (
    ConfigurationError,
    NetworkProfile,
    build_network_profile,
    load_network_config,
    load_network_profile,
)
from .wallet_manager import WalletManager
from .contract_manager import ContractManager
from .contract_deployer import ContractDeployer, DeploymentError, DeploymentResult

__all__ = [
    'ConfigurationError',
    'NetworkProfile',
    'build_network_profile',
    'load_network_config',
    'load_network_profile',
    'WalletManager',
    'ContractManager',
    'ContractDeployer',
    'DeploymentError',
    'DeploymentResult'
]
