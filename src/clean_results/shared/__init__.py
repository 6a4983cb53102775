"""Shared module.

Cross-cutting concerns: configuration, logging, error logging.
"""
from clean_results.shared.config import Settings, get_settings, settings
from clean_results.shared.logging import (
    configure_logging,
    get_logger,
    log_critical,
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "configure_logging",
    "get_logger",
    "log_error", "log_debug", "log_info", "log_warning", "log_critical",
]
