"""
bootstrap/ - Configuration and logging setup
"""

from .config import (
    LifecycleConfig,
    LoggingConfig,
    BreedlineConfig,
    load_config,
    get_config,
    reset_config,
)
from .logs import setup_logging, setup_logging_from_config

__all__ = [
    "LifecycleConfig",
    "LoggingConfig",
    "BreedlineConfig",
    "load_config",
    "get_config",
    "reset_config",
    "setup_logging",
    "setup_logging_from_config",
]
