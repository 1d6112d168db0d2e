"""
Logging Configuration
Loguru sinks shared by the deploy script and the system check
"""

import os
import sys
from typing import List, Optional
from loguru import logger


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure loguru sinks

    Logs go to stderr so stdout only carries the deployment output.

    Args:
        level: Console log level (default: LOG_LEVEL or INFO)
        log_file: Optional file sink (default: LOG_FILE)
    """
    level = level or os.getenv('LOG_LEVEL', 'INFO')
    log_file = log_file or os.getenv('LOG_FILE')

    logger.remove()

    # diagnose=False keeps local variable values (signing key) out of tracebacks
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
        diagnose=False
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG",
            diagnose=False
        )


def redact(text: str, secrets: List[str], replacement: str = "<redacted>") -> str:
    """Replace every secret fragment in text"""
    for secret in sorted(filter(None, secrets), key=len, reverse=True):
        text = text.replace(secret, replacement)
    return text
