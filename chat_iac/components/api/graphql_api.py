"""
AppSync GraphQL API component for the chat application.

The 4-Resource Dependency Chain:
1. GraphQL API: schema + default authorization (Cognito user pool).
2. Log Group: field-level resolver logs, named after the API id.
3. Data Sources: one DynamoDB data source per table (Message, Room),
   each assuming its own table-scoped IAM role.
4. Resolvers: bind Query/Mutation fields to a data source via VTL templates.

Subscriptions (onCreateRoom, onCreateMessageByRoomId) are declared with
@aws_subscribe in the schema and need no resolvers.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from chat_iac.components.api.resolvers import (
    MESSAGE_DATASOURCE,
    RESOLVERS,
    ROOM_DATASOURCE,
    ResolverDefinition,
)
from chat_iac.configs.base import EnvironmentConfig
from chat_iac.utils.tags import create_tags
from chat_iac.utils.naming import ResourceNamer


@dataclass
class GraphqlApiOutputs:
    """Output values from GraphQL API component."""
    api_id: pulumi.Output[str]
    api_arn: pulumi.Output[str]
    graphql_url: pulumi.Output[str]


class ChatGraphqlApiComponent(pulumi.ComponentResource):
    """
    AppSync GraphQL API with DynamoDB data sources and unit resolvers.

    All operations require a signed-in user from the Cognito user pool.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        namer: ResourceNamer,
        user_pool_id: pulumi.Input[str],
        message_table_name: pulumi.Input[str],
        room_table_name: pulumi.Input[str],
        message_datasource_role_arn: pulumi.Input[str],
        room_datasource_role_arn: pulumi.Input[str],
        api_logs_role_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:api:ChatGraphqlApi", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        api_name = namer.api_name(config.api_name)
        pulumi.log.info(f"Creating AppSync API: {api_name}", resource=self)

        log_config = None
        if config.field_log_level != "NONE":
            log_config = aws.appsync.GraphQLApiLogConfigArgs(
                cloudwatch_logs_role_arn=api_logs_role_arn,
                field_log_level=config.field_log_level,
                exclude_verbose_content=config.exclude_verbose_content,
            )

        self.api = aws.appsync.GraphQLApi(
            f"{name}-api",
            name=api_name,
            schema=config.read_schema(),
            authentication_type="AMAZON_COGNITO_USER_POOLS",
            user_pool_config=aws.appsync.GraphQLApiUserPoolConfigArgs(
                default_action="ALLOW",
                user_pool_id=user_pool_id,
            ),
            log_config=log_config,
            tags=create_tags(environment, f"{name}-api"),
            opts=child_opts,
        )

        self.log_group = None
        if log_config is not None:
            # AppSync writes to /aws/appsync/apis/{apiId}
            self.log_group = aws.cloudwatch.LogGroup(
                f"{name}-api-logs",
                name=self.api.id.apply(lambda api_id: f"/aws/appsync/apis/{api_id}"),
                retention_in_days=config.log_retention_days,
                tags=create_tags(environment, f"{name}-api-logs"),
                opts=child_opts,
            )

        self.datasources: dict[str, aws.appsync.DataSource] = {
            MESSAGE_DATASOURCE: self._dynamodb_datasource(
                name, MESSAGE_DATASOURCE, message_table_name, message_datasource_role_arn, child_opts
            ),
            ROOM_DATASOURCE: self._dynamodb_datasource(
                name, ROOM_DATASOURCE, room_table_name, room_datasource_role_arn, child_opts
            ),
        }

        self.resolvers: dict[str, aws.appsync.Resolver] = {}
        for definition in RESOLVERS:
            self.resolvers[f"{definition.type_name}.{definition.field_name}"] = self._resolver(
                name, definition, child_opts
            )

        self.graphql_url = self.api.uris.apply(lambda uris: uris["GRAPHQL"])

        self.register_outputs({
            "api_id": self.api.id,
            "api_arn": self.api.arn,
            "graphql_url": self.graphql_url,
        })

    def _dynamodb_datasource(
        self,
        name: str,
        datasource_name: str,
        table_name: pulumi.Input[str],
        role_arn: pulumi.Input[str],
        child_opts: pulumi.ResourceOptions,
    ) -> aws.appsync.DataSource:
        return aws.appsync.DataSource(
            f"{name}-{datasource_name.lower()}-datasource",
            api_id=self.api.id,
            name=datasource_name,
            type="AMAZON_DYNAMODB",
            service_role_arn=role_arn,
            dynamodb_config=aws.appsync.DataSourceDynamodbConfigArgs(
                table_name=table_name,
            ),
            opts=child_opts,
        )

    def _resolver(
        self,
        name: str,
        definition: ResolverDefinition,
        child_opts: pulumi.ResourceOptions,
    ) -> aws.appsync.Resolver:
        datasource = self.datasources[definition.data_source]
        return aws.appsync.Resolver(
            f"{name}-{definition.resource_suffix}-resolver",
            api_id=self.api.id,
            type=definition.type_name,
            field=definition.field_name,
            kind="UNIT",
            data_source=datasource.name,
            request_template=definition.request_template,
            response_template=definition.response_template,
            opts=child_opts,
        )

    def get_outputs(self) -> GraphqlApiOutputs:
        """Get GraphQL API output values."""
        return GraphqlApiOutputs(
            api_id=self.api.id,
            api_arn=self.api.arn,
            graphql_url=self.graphql_url,
        )
