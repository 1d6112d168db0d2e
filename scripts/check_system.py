"""
System Check Script
Verifies configuration, artifacts and network access before deploying

Usage: python -m scripts.check_system
"""

import os
import sys
from typing import Optional
from loguru import logger

from blockchain import ContractManager, WalletManager, load_network_config, build_network_profile
from utils import RPCManager, configure_logging


def check_environment_variables(config: dict) -> bool:
    """Check that the variables named by the default network are set"""
    logger.info("Checking environment variables...")

    network = config['networks'][config['default_network']]
    required_vars = [network['url_env']] + list(network.get('accounts_env', [])[:1])

    missing = [var for var in required_vars if not os.getenv(var, '').strip()]

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    logger.success("✓ All environment variables set")
    return True


def check_contract_artifact(config: dict) -> bool:
    """Check compiled artifact and compiler version"""
    logger.info("Checking contract artifact...")

    contract_config = config['contract']

    try:
        manager = ContractManager(
            contract_config['name'],
            contract_config.get('artifacts_dir', 'artifacts')
        )
    except (OSError, ValueError) as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(f"  ✓ {manager.contract_name} artifact found")

    expected = config.get('solidity')
    versions = manager.find_compiler_versions()

    if not versions:
        logger.warning("  No build-info found - compiler version not verified")
    elif expected not in versions:
        logger.error(f"  ✗ Artifacts built with solc {', '.join(versions)}, expected {expected}")
        return False
    else:
        logger.success(f"  ✓ Compiled with solc {expected}")

    return True


def check_rpc_connection(config: dict) -> bool:
    """Check the RPC endpoint and the deployer balance"""
    logger.info("Checking RPC connection...")

    try:
        profile = build_network_profile(config)
        wallet = WalletManager(profile)
    except ValueError as e:
        logger.warning(f"  Skipping: {e}")
        return False

    rpc = RPCManager(profile)

    if not rpc.is_healthy():
        logger.error(f"  ✗ {profile.name}: Connection failed ({rpc.endpoint_host})")
        return False

    logger.success(
        f"  ✓ {profile.name}: Connected (Chain: {rpc.get_chain_id()}, Block: {rpc.get_block_number()})"
    )

    balance = wallet.get_balance(rpc.get_web3())
    logger.info(f"  Deployer {wallet.deployer_address}: {balance:.4f} ETH")

    if balance <= 0:
        logger.error("  ✗ Deployer has no funds for gas")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main(config_path: Optional[str] = None) -> int:
    """Run all system checks"""
    configure_logging()

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    try:
        config = load_network_config(config_path)
    except ValueError as e:
        logger.error(f"✗ {e}")
        return 1

    logger.success("✓ Configuration loaded")

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Contract Artifact", check_contract_artifact),
        ("RPC Connection", check_rpc_connection)
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(config)
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
