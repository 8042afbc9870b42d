"""
Cognito user pool component for chat authentication.

Creates:
- User pool with self sign-up and e-mail code verification
- User pool client (public, no secret) for the web front end

Account recovery prefers a verified phone number and falls back to the
verified e-mail address. E-mail is a required, mutable standard attribute and
is verified automatically on sign-up.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from chat_iac.utils.tags import create_tags
from chat_iac.utils.naming import ResourceNamer


@dataclass
class UserPoolOutputs:
    """Output values from user pool component."""
    user_pool_id: pulumi.Output[str]
    user_pool_arn: pulumi.Output[str]
    user_pool_client_id: pulumi.Output[str]


class UserPoolComponent(pulumi.ComponentResource):
    """
    Cognito user pool and client for the chat application.

    The pool is the default authorizer of the GraphQL API.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:auth:UserPool", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.user_pool = aws.cognito.UserPool(
            f"{name}-user-pool",
            name=namer.name("user-pool"),
            # Self sign-up
            admin_create_user_config=aws.cognito.UserPoolAdminCreateUserConfigArgs(
                allow_admin_create_user_only=False,
            ),
            account_recovery_setting=aws.cognito.UserPoolAccountRecoverySettingArgs(
                recovery_mechanisms=[
                    aws.cognito.UserPoolAccountRecoverySettingRecoveryMechanismArgs(
                        name="verified_phone_number",
                        priority=1,
                    ),
                    aws.cognito.UserPoolAccountRecoverySettingRecoveryMechanismArgs(
                        name="verified_email",
                        priority=2,
                    ),
                ],
            ),
            auto_verified_attributes=["email"],
            verification_message_template=aws.cognito.UserPoolVerificationMessageTemplateArgs(
                default_email_option="CONFIRM_WITH_CODE",
            ),
            schemas=[
                aws.cognito.UserPoolSchemaArgs(
                    name="email",
                    attribute_data_type="String",
                    required=True,
                    mutable=True,
                    string_attribute_constraints=aws.cognito.UserPoolSchemaStringAttributeConstraintsArgs(
                        min_length="0",
                        max_length="2048",
                    ),
                ),
            ],
            tags=create_tags(environment, f"{name}-user-pool"),
            opts=child_opts,
        )

        self.user_pool_client = aws.cognito.UserPoolClient(
            f"{name}-user-pool-client",
            name=namer.name("web-client"),
            user_pool_id=self.user_pool.id,
            generate_secret=False,
            opts=child_opts,
        )

        self.register_outputs({
            "user_pool_id": self.user_pool.id,
            "user_pool_arn": self.user_pool.arn,
            "user_pool_client_id": self.user_pool_client.id,
        })

    def get_outputs(self) -> UserPoolOutputs:
        """Get user pool output values."""
        return UserPoolOutputs(
            user_pool_id=self.user_pool.id,
            user_pool_arn=self.user_pool.arn,
            user_pool_client_id=self.user_pool_client.id,
        )
