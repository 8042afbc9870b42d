"""
IAM roles component for the chat tables and GraphQL API.

Creates:
- Message table service role (dynamodb.amazonaws.com) allowed to query the
  messages-by-room-id index
- AppSync data source roles with read/write access to each table
- AppSync logging role for field-level CloudWatch logs
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from chat_iac.configs.constants import (
    APPSYNC_LOGS_POLICY_ARN,
    DYNAMODB_DATA_ACTIONS,
    SERVICE_PRINCIPALS,
)
from chat_iac.utils.tags import create_tags


def assume_role_policy(service: str) -> str:
    """Trust policy allowing an AWS service principal to assume a role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole",
        }],
    })


def table_access_policy(table_arn: str, actions: list[str]) -> str:
    """Allow `actions` on a table and all of its indexes."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": actions,
            "Resource": [table_arn, f"{table_arn}/index/*"],
        }],
    })


def index_query_policy(index_arn: str) -> str:
    """Allow Query on a single secondary index."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": ["dynamodb:Query"],
            "Resource": [index_arn],
        }],
    })


@dataclass
class ChatIamRoleOutputs:
    """Output values from chat IAM roles component."""
    message_table_service_role_arn: pulumi.Output[str]
    message_datasource_role_arn: pulumi.Output[str]
    room_datasource_role_arn: pulumi.Output[str]
    api_logs_role_arn: pulumi.Output[str]


class ChatIamRolesComponent(pulumi.ComponentResource):
    """
    IAM roles for the chat tables and AppSync data sources.

    Data source roles are scoped to a single table each.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        message_table_arn: pulumi.Input[str],
        message_index_arn: pulumi.Input[str],
        room_table_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:ChatIamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Message table service role
        self.message_table_service_role = aws.iam.Role(
            f"{name}-message-table-service-role",
            assume_role_policy=assume_role_policy(SERVICE_PRINCIPALS["dynamodb"]),
            tags=create_tags(environment, f"{name}-message-table-service-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-message-table-service-policy",
            role=self.message_table_service_role.id,
            policy=pulumi.Output.from_input(message_index_arn).apply(index_query_policy),
            opts=child_opts,
        )

        # AppSync data source roles
        self.message_datasource_role = self._datasource_role(
            f"{name}-message-ds", environment, message_table_arn, child_opts
        )
        self.room_datasource_role = self._datasource_role(
            f"{name}-room-ds", environment, room_table_arn, child_opts
        )

        # AppSync logging role
        self.api_logs_role = aws.iam.Role(
            f"{name}-api-logs-role",
            assume_role_policy=assume_role_policy(SERVICE_PRINCIPALS["appsync"]),
            tags=create_tags(environment, f"{name}-api-logs-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-api-logs-push",
            role=self.api_logs_role.name,
            policy_arn=APPSYNC_LOGS_POLICY_ARN,
            opts=child_opts,
        )

        self.register_outputs({
            "message_table_service_role_arn": self.message_table_service_role.arn,
            "message_datasource_role_arn": self.message_datasource_role.arn,
            "room_datasource_role_arn": self.room_datasource_role.arn,
            "api_logs_role_arn": self.api_logs_role.arn,
        })

    def _datasource_role(
        self,
        name: str,
        environment: str,
        table_arn: pulumi.Input[str],
        child_opts: pulumi.ResourceOptions,
    ) -> aws.iam.Role:
        role = aws.iam.Role(
            f"{name}-role",
            assume_role_policy=assume_role_policy(SERVICE_PRINCIPALS["appsync"]),
            tags=create_tags(environment, f"{name}-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-policy",
            role=role.id,
            policy=pulumi.Output.from_input(table_arn).apply(
                lambda arn: table_access_policy(arn, DYNAMODB_DATA_ACTIONS)
            ),
            opts=child_opts,
        )
        return role

    def get_outputs(self) -> ChatIamRoleOutputs:
        """Get IAM role output values."""
        return ChatIamRoleOutputs(
            message_table_service_role_arn=self.message_table_service_role.arn,
            message_datasource_role_arn=self.message_datasource_role.arn,
            room_datasource_role_arn=self.room_datasource_role.arn,
            api_logs_role_arn=self.api_logs_role.arn,
        )
