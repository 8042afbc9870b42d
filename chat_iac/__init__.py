"""
Pulumi infrastructure-as-code for the chat application backend.

This package defines AWS infrastructure including:
- Cognito user pool and client for sign-up / sign-in
- AppSync GraphQL API authorized by the user pool
- DynamoDB tables for messages and rooms
- IAM roles for the API data sources and field logging
- VTL resolvers wiring GraphQL fields to the tables
"""
