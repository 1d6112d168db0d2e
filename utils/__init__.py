"""
Utilities Package
RPC client management and logging setup
"""

from .rpc_manager import RPCManager, endpoint_secrets
from .logging_config import configure_logging, redact

__all__ = [
    'RPCManager',
    'endpoint_secrets',
    'configure_logging',
    'redact'
]
