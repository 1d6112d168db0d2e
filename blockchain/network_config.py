"""
Network Configuration
Loads the network profile used for deployment (compiler version, RPC endpoint, signing key)
"""

import os
import json
from dataclasses import dataclass, field
from typing import Dict, Optional
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/network_config.json"


class ConfigurationError(ValueError):
    """Raised when the network configuration is missing or incomplete"""


@dataclass(frozen=True)
class NetworkProfile:
    """
    Immutable network profile, built once at process start

    The signing key is kept out of repr so the profile can be logged safely.
    """
    name: str
    rpc_url: str
    signing_key: str = field(repr=False)
    request_timeout_ms: int = 200000

    @property
    def request_timeout(self) -> float:
        """Request timeout in seconds"""
        return self.request_timeout_ms / 1000


def load_network_config(path: Optional[str] = None) -> Dict:
    """
    Load network configuration file

    Relative paths resolve against the working directory (the project root,
    where the artifacts directory also lives).

    Args:
        path: Path to the JSON configuration (default: NETWORK_CONFIG or config/network_config.json)

    Returns:
        Configuration dict
    """
    path = path or os.getenv('NETWORK_CONFIG') or DEFAULT_CONFIG_PATH

    if not os.path.exists(path):
        raise ConfigurationError(
            f"Network configuration not found: {os.path.abspath(path)} "
            f"(run from the project root or set NETWORK_CONFIG)"
        )

    with open(path, 'r') as f:
        config = json.load(f)

    logger.debug(f"Loaded network configuration from {path}")
    return config


def build_network_profile(config: Dict, network: Optional[str] = None) -> NetworkProfile:
    """
    Assemble a network profile from configuration and environment

    Args:
        config: Network configuration dict
        network: Network name (None = configured default)

    Returns:
        NetworkProfile
    """
    network_name = network or config.get('default_network')
    networks = config.get('networks', {})

    if network_name not in networks:
        raise ConfigurationError(f"Unknown network: {network_name}")

    network_config = networks[network_name]

    url_env = network_config['url_env']
    accounts_env = network_config.get('accounts_env', [])

    if not accounts_env:
        raise ConfigurationError(f"No accounts configured for network {network_name}")

    # Only the first account signs
    key_env = accounts_env[0]

    rpc_url = os.getenv(url_env, '').strip()
    signing_key = os.getenv(key_env, '').strip()

    missing = [name for name, value in ((url_env, rpc_url), (key_env, signing_key)) if not value]
    if missing:
        raise ConfigurationError(f"{' and '.join(missing)} must be set in .env")

    profile = NetworkProfile(
        name=network_name,
        rpc_url=rpc_url,
        signing_key=signing_key,
        request_timeout_ms=int(network_config.get('timeout', 200000))
    )

    logger.info(f"Network profile: {profile.name} (timeout {profile.request_timeout_ms} ms)")
    return profile


def load_network_profile(
    path: Optional[str] = None,
    network: Optional[str] = None
) -> NetworkProfile:
    """Load configuration file and build the network profile"""
    return build_network_profile(load_network_config(path), network)
