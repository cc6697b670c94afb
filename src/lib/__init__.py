"""Shared utilities and configuration."""

from src.lib.config import Settings, get_settings, reset_settings
from src.lib.exceptions import (
    ShowcaseError,
    InvalidArgumentError,
    ServiceCallError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "ShowcaseError",
    "InvalidArgumentError",
    "ServiceCallError",
]
