"""
Shared test fixtures
"""

import json
import pytest


# Hardhat's well-known development account #0
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture
def deployer_key():
    """Private key of Hardhat development account #0"""
    return TEST_PRIVATE_KEY


@pytest.fixture
def deployer_address():
    """Address derived from deployer_key"""
    return TEST_ADDRESS


@pytest.fixture
def network_config():
    """Network configuration matching config/network_config.json"""
    return {
        'solidity': '0.8.20',
        'default_network': 'sepolia',
        'networks': {
            'sepolia': {
                'url_env': 'INFURA_URL',
                'accounts_env': ['PRIVATE_KEY'],
                'timeout': 200000
            }
        },
        'contract': {
            'name': 'PatentGrantPortal',
            'artifacts_dir': 'artifacts'
        }
    }


@pytest.fixture
def config_file(tmp_path, network_config):
    """Network configuration written to disk"""
    path = tmp_path / "network_config.json"
    path.write_text(json.dumps(network_config))
    return str(path)


@pytest.fixture
def sepolia_env(monkeypatch):
    """Valid deployment environment"""
    monkeypatch.setenv('INFURA_URL', 'https://sepolia.infura.io/v3/secretapikey')
    monkeypatch.setenv('PRIVATE_KEY', TEST_PRIVATE_KEY)


@pytest.fixture
def artifacts_dir(tmp_path):
    """Hardhat-style artifacts directory with a PatentGrantPortal artifact"""
    root = tmp_path / "artifacts"
    contract_dir = root / "contracts" / "PatentGrantPortal.sol"
    contract_dir.mkdir(parents=True)

    (contract_dir / "PatentGrantPortal.json").write_text(json.dumps({
        '_format': 'hh-sol-artifact-1',
        'contractName': 'PatentGrantPortal',
        'abi': [],
        'bytecode': '0x6080604052348015600f57600080fd5b50'
    }))

    build_info = root / "build-info"
    build_info.mkdir()
    (build_info / "a1b2c3.json").write_text(json.dumps({'solcVersion': '0.8.20'}))

    return str(root)
