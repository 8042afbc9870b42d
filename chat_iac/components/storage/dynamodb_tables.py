"""
DynamoDB tables component for chat data.

Two Tables:
1. Message table: one item per chat message, keyed by `id`.
   - GSI `messages-by-room-id`: partition `roomId`, sort `createdAt`.
     listMessagesForRoom queries this index so a room's messages come back
     in timestamp order (ascending or descending).
2. Room table: one item per chat room, keyed by `id`. listRooms scans it.

Both tables use on-demand billing.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from chat_iac.configs.base import EnvironmentConfig
from chat_iac.configs.constants import (
    MESSAGES_BY_ROOM_INDEX,
    MESSAGES_BY_ROOM_KEYS,
    PARTITION_KEY,
    TABLE_BILLING_MODE,
)
from chat_iac.utils.tags import create_tags
from chat_iac.utils.naming import ResourceNamer


@dataclass
class ChatTablesOutputs:
    """Output values from chat tables component."""
    message_table_name: pulumi.Output[str]
    message_table_arn: pulumi.Output[str]
    message_index_arn: pulumi.Output[str]
    room_table_name: pulumi.Output[str]
    room_table_arn: pulumi.Output[str]


class ChatTablesComponent(pulumi.ComponentResource):
    """
    Message and room tables backing the GraphQL data sources.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:ChatTables", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        if config.is_production and not config.enable_deletion_protection:
            pulumi.log.warn(
                "Deletion protection is disabled on production chat tables",
                resource=self,
            )

        self.message_table = aws.dynamodb.Table(
            f"{name}-messages",
            name=namer.table_name("messages"),
            billing_mode=TABLE_BILLING_MODE,
            hash_key=PARTITION_KEY,
            attributes=[
                aws.dynamodb.TableAttributeArgs(name=PARTITION_KEY, type="S"),
                aws.dynamodb.TableAttributeArgs(name=MESSAGES_BY_ROOM_KEYS["partition"], type="S"),
                aws.dynamodb.TableAttributeArgs(name=MESSAGES_BY_ROOM_KEYS["sort"], type="S"),
            ],
            global_secondary_indexes=[
                aws.dynamodb.TableGlobalSecondaryIndexArgs(
                    name=MESSAGES_BY_ROOM_INDEX,
                    hash_key=MESSAGES_BY_ROOM_KEYS["partition"],
                    range_key=MESSAGES_BY_ROOM_KEYS["sort"],
                    projection_type="ALL",
                ),
            ],
            point_in_time_recovery=self._pitr(config),
            deletion_protection_enabled=config.enable_deletion_protection,
            tags=create_tags(environment, f"{name}-messages"),
            opts=child_opts,
        )

        self.room_table = aws.dynamodb.Table(
            f"{name}-rooms",
            name=namer.table_name("rooms"),
            billing_mode=TABLE_BILLING_MODE,
            hash_key=PARTITION_KEY,
            attributes=[
                aws.dynamodb.TableAttributeArgs(name=PARTITION_KEY, type="S"),
            ],
            point_in_time_recovery=self._pitr(config),
            deletion_protection_enabled=config.enable_deletion_protection,
            tags=create_tags(environment, f"{name}-rooms"),
            opts=child_opts,
        )

        self.message_index_arn = self.message_table.arn.apply(
            lambda arn: f"{arn}/index/{MESSAGES_BY_ROOM_INDEX}"
        )

        self.register_outputs({
            "message_table_name": self.message_table.name,
            "message_table_arn": self.message_table.arn,
            "message_index_arn": self.message_index_arn,
            "room_table_name": self.room_table.name,
            "room_table_arn": self.room_table.arn,
        })

    @staticmethod
    def _pitr(config: EnvironmentConfig) -> aws.dynamodb.TablePointInTimeRecoveryArgs:
        return aws.dynamodb.TablePointInTimeRecoveryArgs(
            enabled=config.enable_point_in_time_recovery,
        )

    def get_outputs(self) -> ChatTablesOutputs:
        """Get chat table output values."""
        return ChatTablesOutputs(
            message_table_name=self.message_table.name,
            message_table_arn=self.message_table.arn,
            message_index_arn=self.message_index_arn,
            room_table_name=self.room_table.name,
            room_table_arn=self.room_table.arn,
        )
