"""
Unit Tests for Contract Artifact Loading
"""

import json
import os
import pytest
from unittest.mock import MagicMock

from blockchain.contract_manager import ContractManager


class TestContractManager:
    """Test Hardhat artifact handling"""

    def test_load_artifact(self, artifacts_dir):
        manager = ContractManager('PatentGrantPortal', artifacts_dir)

        assert manager.abi == []
        assert manager.bytecode.startswith('0x6080')
        assert manager.artifact_path.endswith(
            os.path.join('contracts', 'PatentGrantPortal.sol', 'PatentGrantPortal.json')
        )

    def test_missing_artifact(self, tmp_path):
        with pytest.raises(FileNotFoundError, match='npx hardhat compile'):
            ContractManager('PatentGrantPortal', str(tmp_path))

    def test_artifact_without_bytecode(self, artifacts_dir):
        path = os.path.join(artifacts_dir, 'contracts', 'PatentGrantPortal.sol', 'PatentGrantPortal.json')
        with open(path, 'w') as f:
            json.dump({'abi': [], 'bytecode': '0x'}, f)

        with pytest.raises(ValueError, match='no bytecode'):
            ContractManager('PatentGrantPortal', artifacts_dir)

    def test_get_contract_factory(self, artifacts_dir):
        manager = ContractManager('PatentGrantPortal', artifacts_dir)
        w3 = MagicMock()

        factory = manager.get_contract_factory(w3)

        assert factory is w3.eth.contract.return_value
        w3.eth.contract.assert_called_once_with(abi=manager.abi, bytecode=manager.bytecode)

    def test_find_compiler_versions(self, artifacts_dir):
        manager = ContractManager('PatentGrantPortal', artifacts_dir)

        assert manager.find_compiler_versions() == ['0.8.20']

    def test_find_compiler_versions_skips_unreadable(self, artifacts_dir):
        with open(os.path.join(artifacts_dir, 'build-info', 'broken.json'), 'w') as f:
            f.write('{not json')

        manager = ContractManager('PatentGrantPortal', artifacts_dir)

        assert manager.find_compiler_versions() == ['0.8.20']
