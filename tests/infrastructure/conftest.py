"""Pytest fixtures for infrastructure tests."""

import itertools
import sys
from pathlib import Path

import pulumi
import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

_ACCOUNT = "123456789012"
_REGION = "us-east-1"


class ChatAppMocks(pulumi.runtime.Mocks):
    """Records every registered resource and fills in provider-computed outputs."""

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        resource_id = f"{args.name}-id"
        outputs = dict(args.inputs)

        if args.typ == "aws:dynamodb/table:Table":
            outputs["arn"] = f"arn:aws:dynamodb:{_REGION}:{_ACCOUNT}:table/{args.inputs['name']}"
        elif args.typ == "aws:appsync/graphQLApi:GraphQLApi":
            outputs["arn"] = f"arn:aws:appsync:{_REGION}:{_ACCOUNT}:apis/{resource_id}"
            outputs["uris"] = {
                "GRAPHQL": f"https://{resource_id}.appsync-api.{_REGION}.amazonaws.com/graphql",
            }
        elif args.typ.startswith("aws:"):
            outputs.setdefault("arn", f"arn:aws:mock:{_REGION}:{_ACCOUNT}:{args.name}")

        return [resource_id, outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]

    def named(self, fragment: str) -> list[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if fragment in r.name]


# Resource registrations go to an in-process mock monitor instead of the engine.
MOCKS = ChatAppMocks()
pulumi.runtime.set_mocks(MOCKS, project="chat-app", stack="test", preview=False)

_unique = itertools.count()


@pytest.fixture
def chat_mocks():
    """Mock monitor with the resource log cleared."""
    MOCKS.resources.clear()
    return MOCKS


@pytest.fixture
def unique_name():
    """Return a fresh logical name so URNs never collide across tests."""
    return f"chat-t{next(_unique)}"


@pytest.fixture
def dev_config():
    from chat_iac.configs.base import EnvironmentConfig

    return EnvironmentConfig(environment="dev", api_name="cdk-chat-app")


@pytest.fixture
def namer(unique_name):
    from chat_iac.utils.naming import ResourceNamer

    return ResourceNamer(project=unique_name, environment="dev")


@pytest.fixture
def iac_project_root():
    """Return the IaC package root directory."""
    return PROJECT_ROOT / "chat_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the IaC package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]
