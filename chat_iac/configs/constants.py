"""
Infrastructure constants for the chat backend.

Contains table key schemas, index names, template versions, and default tags.
"""

from typing import Final

PROJECT_NAME: Final[str] = "chat-app"

ENVIRONMENTS: Final[tuple[str, ...]] = ("dev", "staging", "prod")

# AppSync field log levels
FIELD_LOG_LEVELS: Final[tuple[str, ...]] = ("NONE", "ERROR", "ALL")

DEFAULT_API_NAME: Final[str] = "cdk-chat-app"

# DynamoDB
TABLE_BILLING_MODE: Final[str] = "PAY_PER_REQUEST"
PARTITION_KEY: Final[str] = "id"
MESSAGES_BY_ROOM_INDEX: Final[str] = "messages-by-room-id"
MESSAGES_BY_ROOM_KEYS: Final[dict[str, str]] = {
    "partition": "roomId",
    "sort": "createdAt",
}

# IAM service principals
SERVICE_PRINCIPALS: Final[dict[str, str]] = {
    "appsync": "appsync.amazonaws.com",
    "dynamodb": "dynamodb.amazonaws.com",
}

APPSYNC_LOGS_POLICY_ARN: Final[str] = (
    "arn:aws:iam::aws:policy/service-role/AWSAppSyncPushToCloudWatchLogs"
)

# Read/write actions granted to the AppSync DynamoDB data sources
DYNAMODB_DATA_ACTIONS: Final[list[str]] = [
    "dynamodb:BatchGetItem",
    "dynamodb:BatchWriteItem",
    "dynamodb:ConditionCheckItem",
    "dynamodb:DeleteItem",
    "dynamodb:DescribeTable",
    "dynamodb:GetItem",
    "dynamodb:PutItem",
    "dynamodb:Query",
    "dynamodb:Scan",
    "dynamodb:UpdateItem",
]

LOG_RETENTION_DAYS: Final[int] = 30

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}
