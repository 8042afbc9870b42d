"""
Tests for the full chat backend wiring under Pulumi mocks.
"""

import runpy
from unittest.mock import MagicMock

import pulumi

import chat_iac.utils.outputs
from chat_iac.stack import deploy_chat_backend

EXPECTED_OUTPUTS = {
    "user_pool_id",
    "user_pool_client_id",
    "graphql_api_url",
    "graphql_api_id",
    "message_table_name",
    "message_table_arn",
    "room_table_name",
    "room_table_arn",
}


def _deploy(config, namer) -> dict:
    resolved = {}

    @pulumi.runtime.test
    def declare():
        outputs = deploy_chat_backend(config, namer)
        return pulumi.Output.all(**outputs).apply(resolved.update)

    declare()
    return resolved


def test_empty_program_registers_nothing(chat_mocks):
    @pulumi.runtime.test
    def declare():
        return pulumi.Output.from_input(None)

    declare()

    assert [r for r in chat_mocks.resources if r.typ.startswith("aws:")] == []


def test_resource_counts(chat_mocks, dev_config, namer):
    _deploy(dev_config, namer)

    counts = {
        "aws:cognito/userPool:UserPool": 1,
        "aws:cognito/userPoolClient:UserPoolClient": 1,
        "aws:dynamodb/table:Table": 2,
        "aws:iam/role:Role": 4,
        "aws:iam/rolePolicy:RolePolicy": 3,
        "aws:iam/rolePolicyAttachment:RolePolicyAttachment": 1,
        "aws:appsync/graphQLApi:GraphQLApi": 1,
        "aws:appsync/dataSource:DataSource": 2,
        "aws:appsync/resolver:Resolver": 4,
        "aws:cloudwatch/logGroup:LogGroup": 1,
    }
    for typ, expected in counts.items():
        assert len(chat_mocks.of_type(typ)) == expected, typ


def test_stack_outputs(dev_config, namer):
    outputs = _deploy(dev_config, namer)

    assert set(outputs) == EXPECTED_OUTPUTS
    assert outputs["message_table_name"] == namer.table_name("messages")
    assert outputs["room_table_name"] == namer.table_name("rooms")
    assert outputs["graphql_api_url"].endswith("/graphql")
    assert outputs["user_pool_id"].endswith("-user-pool-id")


def test_api_is_wired_to_pool_tables_and_roles(chat_mocks, dev_config, namer):
    outputs = _deploy(dev_config, namer)

    [api] = chat_mocks.of_type("aws:appsync/graphQLApi:GraphQLApi")
    assert api.inputs["userPoolConfig"]["userPoolId"] == outputs["user_pool_id"]

    datasources = {d.inputs["name"]: d for d in chat_mocks.of_type("aws:appsync/dataSource:DataSource")}
    assert datasources["Message"].inputs["dynamodbConfig"]["tableName"] == outputs["message_table_name"]
    assert datasources["Room"].inputs["dynamodbConfig"]["tableName"] == outputs["room_table_name"]

    [message_ds_role] = chat_mocks.named("message-ds-role")
    assert datasources["Message"].inputs["serviceRoleArn"].endswith(message_ds_role.name)


def test_main_exports_outputs_and_writes_env_file(chat_mocks, monkeypatch, tmp_path):
    config = MagicMock()
    config.require.side_effect = {"environment": "dev"}.__getitem__
    config.get.return_value = None
    config.get_bool.return_value = None
    config.get_int.return_value = None
    monkeypatch.setattr("chat_iac.configs.environment.pulumi.Config", lambda: config)

    export = MagicMock()
    monkeypatch.setattr(pulumi, "export", export)
    monkeypatch.chdir(tmp_path)

    written = []
    write_outputs_to_env = chat_iac.utils.outputs.write_outputs_to_env

    def record_write(outputs, filename):
        written.append(write_outputs_to_env(outputs, filename))
        return written[-1]

    monkeypatch.setattr(chat_iac.utils.outputs, "write_outputs_to_env", record_write)

    @pulumi.runtime.test
    def run_program():
        runpy.run_module("chat_iac", run_name="__main__")
        return written[0]

    run_program()

    assert {c.args[0] for c in export.call_args_list} == EXPECTED_OUTPUTS
    env_lines = (tmp_path / "infrastructure.env").read_text().splitlines()
    assert "MESSAGE_TABLE_NAME=chat-app-dev-messages" in env_lines
    assert "ROOM_TABLE_NAME=chat-app-dev-rooms" in env_lines
