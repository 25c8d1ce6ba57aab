"""Shared modules: configuration and logging."""

from .config import BenchmarkConfig, ConfigurationError
from .logging import configure_logging

__all__ = [
	"BenchmarkConfig",
	"ConfigurationError",
	"configure_logging",
]
