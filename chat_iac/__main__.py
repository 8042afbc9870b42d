"""
Pulumi program entry point for the chat backend infrastructure.

Loads stack configuration, declares the chat resources, and exports the
identifiers the front end needs (user pool, client, GraphQL endpoint).
"""

import pulumi

from chat_iac.configs.constants import PROJECT_NAME
from chat_iac.configs.environment import get_config
from chat_iac.stack import deploy_chat_backend
from chat_iac.utils.naming import ResourceNamer
from chat_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy chat backend infrastructure."""
    config = get_config()
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)

    outputs = deploy_chat_backend(config, namer)

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"Declared chat backend for '{config.environment}'")


# Execute
main()
