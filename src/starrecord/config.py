"""
Configuration Management for StarRecord

Holds the process-wide settings of the model layer: logging and the
leniency of attribute updates. Values come from code or from
STARRECORD_* environment variables.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field
import logging
import os


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RecordConfig:
    """Complete StarRecord configuration"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # update() silently skips keys that are not declared attributes when True
    ignore_unknown_attributes: bool = True

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RecordConfig':
        """Create configuration from dictionary"""
        config = cls()

        if "ignore_unknown_attributes" in config_dict:
            config.ignore_unknown_attributes = bool(config_dict["ignore_unknown_attributes"])

        if "logging" in config_dict:
            for key, value in config_dict["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    @classmethod
    def from_environment(cls) -> 'RecordConfig':
        """Create configuration from environment variables"""
        config = cls()

        if os.getenv('STARRECORD_LOG_LEVEL'):
            config.logging.level = os.getenv('STARRECORD_LOG_LEVEL').upper()

        if os.getenv('STARRECORD_STRICT_UPDATE'):
            strict = os.getenv('STARRECORD_STRICT_UPDATE').lower() == 'true'
            config.ignore_unknown_attributes = not strict

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "ignore_unknown_attributes": self.ignore_unknown_attributes,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }


# Global configuration management
_current_config: Optional[RecordConfig] = None


def set_config(config: Optional[RecordConfig]):
    """Set the global configuration. Passing None re-reads the environment on next access."""
    global _current_config
    _current_config = config


def get_config() -> RecordConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        _current_config = RecordConfig.from_environment()

    return _current_config


def configure_logging(config: Optional[RecordConfig] = None) -> None:
    """Apply the logging section of the configuration to the root logger."""
    config = config or get_config()
    logging.basicConfig(level=config.logging.level, format=config.logging.format)


__all__ = [
    "RecordConfig", "LoggingConfig",
    "set_config", "get_config", "configure_logging",
]
