"""
Logging setup - requires loguru.

Library modules log through ``loguru.logger`` at debug level only. The package
is disabled on import; applications opt in with :func:`configure_logging`.
"""

__all__ = ["configure_logging"]

import sys

from loguru import logger

from pocketutils.config import CONFIG


def configure_logging(level: str | None = None, sink=None) -> int:
    """
    Enable pocketutils log records and route them to a single sink.

    Args:
        level: Minimum level name (default: CONFIG["log_level"])
        sink: Any loguru sink (default: stderr)

    Returns:
        The loguru handler id, usable with ``logger.remove``
    """
    logger.remove()
    logger.enable("pocketutils")
    return logger.add(
        sink or sys.stderr,
        level=(level or CONFIG["log_level"]).upper(),
        format=CONFIG["log_format"],
    )
