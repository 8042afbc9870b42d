"""
Chat backend resource wiring.

Instantiates all component resources in dependency order:
1. Cognito user pool and client
2. DynamoDB message and room tables
3. IAM roles (table service role, data source roles, logging role)
4. AppSync GraphQL API, data sources and resolvers
"""

import pulumi

from chat_iac.configs.base import EnvironmentConfig
from chat_iac.utils.naming import ResourceNamer

from chat_iac.components.auth.user_pool import UserPoolComponent
from chat_iac.components.storage.dynamodb_tables import ChatTablesComponent
from chat_iac.components.security.iam_roles import ChatIamRolesComponent
from chat_iac.components.api.graphql_api import ChatGraphqlApiComponent


def deploy_chat_backend(
    config: EnvironmentConfig,
    namer: ResourceNamer,
) -> dict[str, pulumi.Output[str]]:
    """
    Declare the chat backend resources.

    Args:
        config: Configuration object from get_config()
        namer: ResourceNamer instance

    Returns:
        Stack outputs keyed by export name
    """
    base_name = namer.name("chat")

    # --- Layer 1: Authentication ---
    user_pool = UserPoolComponent(
        name=base_name,
        environment=config.environment,
        namer=namer,
    )
    pool_outputs = user_pool.get_outputs()

    # --- Layer 2: Tables ---
    tables = ChatTablesComponent(
        name=base_name,
        environment=config.environment,
        config=config,
        namer=namer,
    )
    table_outputs = tables.get_outputs()

    # --- Layer 3: IAM Roles ---
    iam_roles = ChatIamRolesComponent(
        name=base_name,
        environment=config.environment,
        message_table_arn=table_outputs.message_table_arn,
        message_index_arn=table_outputs.message_index_arn,
        room_table_arn=table_outputs.room_table_arn,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 4: GraphQL API ---
    graphql_api = ChatGraphqlApiComponent(
        name=base_name,
        environment=config.environment,
        config=config,
        namer=namer,
        user_pool_id=pool_outputs.user_pool_id,
        message_table_name=table_outputs.message_table_name,
        room_table_name=table_outputs.room_table_name,
        message_datasource_role_arn=iam_outputs.message_datasource_role_arn,
        room_datasource_role_arn=iam_outputs.room_datasource_role_arn,
        api_logs_role_arn=iam_outputs.api_logs_role_arn,
    )
    api_outputs = graphql_api.get_outputs()

    return {
        "user_pool_id": pool_outputs.user_pool_id,
        "user_pool_client_id": pool_outputs.user_pool_client_id,
        "graphql_api_url": api_outputs.graphql_url,
        "graphql_api_id": api_outputs.api_id,
        "message_table_name": table_outputs.message_table_name,
        "message_table_arn": table_outputs.message_table_arn,
        "room_table_name": table_outputs.room_table_name,
        "room_table_arn": table_outputs.room_table_arn,
    }
