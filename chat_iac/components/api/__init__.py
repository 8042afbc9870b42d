"""
API components for the chat GraphQL endpoint.

Components:
- ChatGraphqlApiComponent: AppSync API, DynamoDB data sources, resolvers
"""

from chat_iac.components.api.graphql_api import ChatGraphqlApiComponent, GraphqlApiOutputs
from chat_iac.components.api.resolvers import RESOLVERS, ResolverDefinition, load_mapping_template

__all__ = [
    "ChatGraphqlApiComponent",
    "GraphqlApiOutputs",
    "RESOLVERS",
    "ResolverDefinition",
    "load_mapping_template",
]
