"""
Majra Shared Library
====================

Common utilities, configuration, and abstractions used by the Majra
compliance records service.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - auth: JWT bearer-token validation and tenant resolution
    - database: Async PostgreSQL client
    - models: Shared Pydantic request/response models

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Majra Team"

from shared.config import settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "__version__",
]
