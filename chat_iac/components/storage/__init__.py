"""
Storage components for chat data.

Components:
- ChatTablesComponent: Message and room DynamoDB tables
"""

from chat_iac.components.storage.dynamodb_tables import ChatTablesComponent, ChatTablesOutputs

__all__ = [
    "ChatTablesComponent",
    "ChatTablesOutputs",
]
