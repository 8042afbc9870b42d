"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

from pathlib import Path

import pulumi

from chat_iac.configs.base import DEFAULT_SCHEMA_PATH, EnvironmentConfig
from chat_iac.configs.constants import (
    DEFAULT_API_NAME,
    ENVIRONMENTS,
    FIELD_LOG_LEVELS,
    LOG_RETENTION_DAYS,
)


def _validate_choice(key: str, value: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ValueError(
            f"Invalid value {value!r} for config key '{key}'; "
            f"expected one of: {', '.join(choices)}"
        )
    return value


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If a config value is outside its allowed set
    """
    config = pulumi.Config()

    environment = _validate_choice(
        "environment", config.require("environment"), ENVIRONMENTS
    )
    field_log_level = _validate_choice(
        "field_log_level",
        (config.get("field_log_level") or "ALL").upper(),
        FIELD_LOG_LEVELS,
    )

    schema_path = config.get("schema_path")
    # 0 is valid: the log group never expires
    log_retention_days = config.get_int("log_retention_days")
    if log_retention_days is None:
        log_retention_days = LOG_RETENTION_DAYS

    return EnvironmentConfig(
        environment=environment,
        api_name=config.get("api_name") or DEFAULT_API_NAME,
        field_log_level=field_log_level,
        exclude_verbose_content=config.get_bool("exclude_verbose_content") or False,
        log_retention_days=log_retention_days,
        enable_point_in_time_recovery=config.get_bool("enable_point_in_time_recovery") or False,
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
        schema_path=Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH,
    )
