"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from src.core.config.gateway_config import GatewayConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.settings import Config, config

__all__ = [
    "Config",
    "GatewayConfig",
    "LoggingConfig",
    "config",
]
