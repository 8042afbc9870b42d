"""
Authentication components.

Components:
- UserPoolComponent: Cognito user pool and web client
"""

from chat_iac.components.auth.user_pool import UserPoolComponent, UserPoolOutputs

__all__ = [
    "UserPoolComponent",
    "UserPoolOutputs",
]
