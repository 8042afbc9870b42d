"""
Security components for IAM.

Components:
- ChatIamRolesComponent: Table service role, data source roles, API logging role
"""

from chat_iac.components.security.iam_roles import ChatIamRolesComponent, ChatIamRoleOutputs

__all__ = [
    "ChatIamRolesComponent",
    "ChatIamRoleOutputs",
]
