"""
Shared module - Cross-cutting concerns

Constants, enums and logging helpers used by every layer of the
forecasting service. Nothing here may depend on Infrastructure or
on the web framework.
"""

from .consts import FEATURE_COUNT, MODEL_TYPE_LINEAR, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "FEATURE_COUNT",
    "MODEL_TYPE_LINEAR",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
