"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass
from pathlib import Path

# Bundled GraphQL schema
DEFAULT_SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.graphql"


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        api_name: Base name of the GraphQL API
        field_log_level: AppSync field log level (NONE, ERROR, ALL)
        exclude_verbose_content: Drop headers/context from field logs
        log_retention_days: Retention for the API log group
        enable_point_in_time_recovery: Enable PITR on the chat tables
        enable_deletion_protection: Enable deletion protection on the chat tables
        schema_path: Path to the GraphQL schema file
    """
    environment: str
    api_name: str
    field_log_level: str = "ALL"
    exclude_verbose_content: bool = False
    log_retention_days: int = 30
    enable_point_in_time_recovery: bool = False
    enable_deletion_protection: bool = False
    schema_path: Path = DEFAULT_SCHEMA_PATH

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    def read_schema(self) -> str:
        """Read the GraphQL schema definition."""
        return Path(self.schema_path).read_text(encoding="utf-8")
