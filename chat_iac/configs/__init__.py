"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from chat_iac.configs.base import EnvironmentConfig
from chat_iac.configs.environment import get_config
from chat_iac.configs.constants import (
    DEFAULT_TAGS,
    MESSAGES_BY_ROOM_INDEX,
    TABLE_BILLING_MODE,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "DEFAULT_TAGS",
    "MESSAGES_BY_ROOM_INDEX",
    "TABLE_BILLING_MODE",
]
