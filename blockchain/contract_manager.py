"""
Contract Manager
Loads compiled contract artifacts produced by the Hardhat toolchain
"""

import os
import json
import glob
from typing import Dict, List
from web3 import Web3
from loguru import logger


class ContractManager:
    """
    Reads a compiled contract artifact and creates contract factories from it
    """

    def __init__(self, contract_name: str, artifacts_dir: str = "artifacts"):
        """
        Initialize Contract Manager

        Args:
            contract_name: Contract name (also the .sol file name)
            artifacts_dir: Hardhat artifacts directory
        """
        self.contract_name = contract_name
        self.artifacts_dir = artifacts_dir

        self.artifact = self._load_artifact()
        self.abi = self.artifact['abi']
        self.bytecode = self.artifact['bytecode']

        logger.info(f"{contract_name} artifact loaded from {self.artifact_path}")

    @property
    def artifact_path(self) -> str:
        return os.path.join(
            self.artifacts_dir,
            "contracts",
            f"{self.contract_name}.sol",
            f"{self.contract_name}.json"
        )

    def _load_artifact(self) -> Dict:
        """Load and check the artifact JSON"""
        path = self.artifact_path

        if not os.path.exists(path):
            raise FileNotFoundError(
                f"Contract artifact not found: {path} (run 'npx hardhat compile' first)"
            )

        with open(path, 'r') as f:
            artifact = json.load(f)

        bytecode = artifact.get('bytecode', '')
        if bytecode in ('', '0x'):
            raise ValueError(f"{self.contract_name} has no bytecode (abstract contract or interface?)")

        return artifact

    def get_contract_factory(self, w3: Web3):
        """
        Create a deployable contract factory

        Args:
            w3: Web3 instance

        Returns:
            Contract factory (no address)
        """
        return w3.eth.contract(abi=self.abi, bytecode=self.bytecode)

    def find_compiler_versions(self) -> List[str]:
        """
        Compiler versions recorded in Hardhat build-info files

        Returns:
            Sorted list of solc versions
        """
        versions = set()

        for path in glob.glob(os.path.join(self.artifacts_dir, "build-info", "*.json")):
            try:
                with open(path, 'r') as f:
                    version = json.load(f).get('solcVersion')
                if version:
                    versions.add(version)
            except (OSError, ValueError) as e:
                logger.warning(f"Unreadable build-info file {path}: {e}")

        return sorted(versions)
