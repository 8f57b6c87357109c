"""
bootstrap/config.py - Engine configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger("bootstrap.config")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LifecycleConfig:
    """Transition policy configuration."""

    # Target phases that require human confirmation before committing
    confirm_phases: List[str] = field(default_factory=lambda: ["COMMITTED"])

    # Send the snapshot's evidence with each commit request
    send_evidence_with_commit: bool = True

    # Log when a snapshot's status falls back to PLANNING
    warn_on_unknown_status: bool = True

    # Recorded as triggered_by when the caller names no actor
    default_actor: str = "user"

    @classmethod
    def from_env(cls) -> "LifecycleConfig":
        phases = os.getenv("BREEDLINE_CONFIRM_PHASES", "COMMITTED")
        return cls(
            confirm_phases=[p.strip() for p in phases.split(",") if p.strip()],
            send_evidence_with_commit=_env_bool("BREEDLINE_SEND_EVIDENCE", "true"),
            warn_on_unknown_status=_env_bool("BREEDLINE_WARN_UNKNOWN_STATUS", "true"),
            default_actor=os.getenv("BREEDLINE_DEFAULT_ACTOR", "user"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("BREEDLINE_LOG_LEVEL", "INFO"),
            format=os.getenv("BREEDLINE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("BREEDLINE_LOG_FILE"),
            json_logs=_env_bool("BREEDLINE_JSON_LOGS", "false"),
        )


@dataclass
class BreedlineConfig:
    """Root configuration for the lifecycle engine."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    lifecycle: LifecycleConfig = field(default_factory=LifecycleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Additional settings
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "BreedlineConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("BREEDLINE_ENVIRONMENT", "development"),
            debug=_env_bool("BREEDLINE_DEBUG", "false"),
            lifecycle=LifecycleConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "BreedlineConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "BreedlineConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "lifecycle" in data:
            for key, value in data["lifecycle"].items():
                if hasattr(config.lifecycle, key):
                    setattr(config.lifecycle, key, value)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        if "settings" in data:
            config.settings.update(data["settings"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "lifecycle": {
                "confirm_phases": list(self.lifecycle.confirm_phases),
                "send_evidence_with_commit": self.lifecycle.send_evidence_with_commit,
                "warn_on_unknown_status": self.lifecycle.warn_on_unknown_status,
                "default_actor": self.lifecycle.default_actor,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[BreedlineConfig] = None


def load_config(filepath: str = None) -> BreedlineConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        BreedlineConfig instance
    """
    global _config

    if filepath:
        _config = BreedlineConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./breedline.json",
            "./config/breedline.json",
            os.path.expanduser("~/.breedline/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = BreedlineConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = BreedlineConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> BreedlineConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config
    _config = None
