"""
Pulumi component resources for the chat backend.

Each submodule provides reusable ComponentResource classes:
- auth: Cognito user pool and client
- storage: DynamoDB message and room tables
- security: IAM roles for tables, data sources and API logging
- api: AppSync GraphQL API, data sources and resolvers
"""
