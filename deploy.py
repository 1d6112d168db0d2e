"""
PatentGrantPortal Deployment
Deploys the PatentGrantPortal contract to the configured network

Usage: python deploy.py
"""

import sys
import traceback
from typing import Optional
from loguru import logger

from blockchain import (
    ContractDeployer,
    ContractManager,
    DeploymentResult,
    NetworkProfile,
    WalletManager,
    load_network_config,
    build_network_profile,
)
from utils import RPCManager, configure_logging, endpoint_secrets, redact


def deploy_contract(profile: NetworkProfile, config: dict) -> DeploymentResult:
    """
    Deploy the configured contract once

    Args:
        profile: Network profile
        config: Network configuration (contract section)

    Returns:
        DeploymentResult
    """
    contract_config = config['contract']

    wallet = WalletManager(profile)
    print(f"Deploying contracts with the account: {wallet.deployer_address}")

    w3 = RPCManager(profile).connect()

    contract_manager = ContractManager(
        contract_config['name'],
        contract_config.get('artifacts_dir', 'artifacts')
    )

    deployer = ContractDeployer(w3, wallet, timeout=profile.request_timeout)
    result = deployer.deploy(contract_manager.get_contract_factory(w3))

    print(f"Contract address: {result.contract_address}")
    return result


def main(config_path: Optional[str] = None) -> int:
    """
    Run the deployment

    Args:
        config_path: Network configuration (default: NETWORK_CONFIG or config/network_config.json)

    Returns:
        Process exit code
    """
    configure_logging()

    profile = None

    try:
        config = load_network_config(config_path)
        profile = build_network_profile(config)

        logger.info(f"Compiler version: {config.get('solidity')}")

        deploy_contract(profile, config)

    except Exception as e:
        secrets = endpoint_secrets(profile.rpc_url) if profile else []
        details = "".join(traceback.format_exception(type(e), e, e.__traceback__))

        # requests errors quote the full URL, which carries the provider API key
        if any(secret in details for secret in secrets):
            logger.error(f"Deployment failed: {redact(str(e), secrets)}\n{redact(details, secrets)}")
        else:
            logger.exception(f"Deployment failed: {e}")
        return 1

    return 0


def run():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
