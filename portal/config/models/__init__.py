"""Configuration section models."""

from portal.config.models.api import APIConfig
from portal.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from portal.config.models.registry import RegistryConfig

__all__ = [
    "APIConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "RegistryConfig",
]
