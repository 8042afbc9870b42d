"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'user-pool', 'messages')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"

    def table_name(self, suffix: str) -> str:
        """
        Generate a DynamoDB table name (unique per account and region).

        Args:
            suffix: Table suffix (e.g., 'messages', 'rooms')

        Returns:
            Table name with project and environment prefix
        """
        return f"{self.project}-{self.environment}-{suffix}"

    def api_name(self, base: str) -> str:
        """Generate the GraphQL API name, suffixed with the environment."""
        return f"{base}-{self.environment}"
