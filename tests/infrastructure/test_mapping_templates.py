"""
Tests for resolver definitions and their VTL mapping templates.

The templates are evaluated by AppSync, so these tests only pin down what is
sent: the operation, index, defaults, and error passthrough for each field.
"""

import pytest

from chat_iac.components.api.resolvers import (
    MAPPING_TEMPLATES_DIR,
    RESOLVERS,
    ResolverDefinition,
    load_mapping_template,
)
from chat_iac.configs.constants import MESSAGES_BY_ROOM_INDEX


def _resolver(field_name: str) -> ResolverDefinition:
    return next(r for r in RESOLVERS if r.field_name == field_name)


class TestResolverTable:
    """Tests for the static resolver table."""

    def test_fields_are_unique(self):
        keys = [(r.type_name, r.field_name) for r in RESOLVERS]
        assert len(keys) == len(set(keys))

    def test_every_template_exists(self):
        for resolver in RESOLVERS:
            assert resolver.request_template
            assert resolver.response_template

    def test_no_unused_templates(self):
        referenced = {
            name
            for r in RESOLVERS
            for name in (r.request_template_name, r.response_template_name)
        }
        on_disk = {path.stem for path in MAPPING_TEMPLATES_DIR.glob("*.vtl")}
        assert on_disk == referenced

    def test_resource_suffix(self):
        assert _resolver("listRooms").resource_suffix == "query-listrooms"

    def test_missing_template_raises(self):
        with pytest.raises(FileNotFoundError, match="does_not_exist"):
            load_mapping_template("does_not_exist.request")


class TestListMessagesForRoomTemplate:
    """Query on the room index with optional descending order."""

    def test_queries_room_index(self):
        template = _resolver("listMessagesForRoom").request_template

        assert '"operation" : "Query"' in template
        assert f'"index" : "{MESSAGES_BY_ROOM_INDEX}"' in template
        assert '"expression": "roomId = :roomId"' in template

    def test_sort_direction_and_pagination(self):
        template = _resolver("listMessagesForRoom").request_template

        assert '$ctx.arguments.sortDirection == "DESC"' in template
        assert '"scanIndexForward": false' in template
        assert '"scanIndexForward": true' in template
        assert '"nextToken": "$context.arguments.nextToken"' in template

    def test_errors_are_propagated(self):
        template = _resolver("listMessagesForRoom").response_template

        assert "$util.error($ctx.error.message, $ctx.error.type)" in template
        assert "$util.toJson($ctx.result)" in template


class TestCreateMessageTemplate:
    """PutItem with generated id, timestamp and owner."""

    def test_defaults_and_owner(self):
        template = _resolver("createMessage").request_template

        assert '$util.defaultIfNull($ctx.args.input.id, $util.autoId())' in template
        assert "$util.time.nowISO8601()" in template
        assert '$ctx.args.input.put("owner", $context.identity.username)' in template

    def test_put_is_conditional_on_new_id(self):
        template = _resolver("createMessage").request_template

        assert '"operation": "PutItem"' in template
        assert '"expression": "attribute_not_exists(#id)"' in template
        assert '"condition": $util.toJson($condition)' in template

    def test_returns_result_item(self):
        assert _resolver("createMessage").response_template.strip() == "$util.toJson($ctx.result)"


class TestListRoomsTemplate:
    """Scan with a default page size."""

    def test_scan_with_default_limit(self):
        template = _resolver("listRooms").request_template

        assert "$util.defaultIfNull($context.args.limit, 1000)" in template
        assert '$ListRequest.put("operation", "Scan")' in template
        assert "#set( $ListRequest.nextToken = $context.args.nextToken )" in template

    def test_errors_are_propagated(self):
        assert "$util.error(" in _resolver("listRooms").response_template


class TestCreateRoomTemplate:
    """PutItem with a generated id."""

    def test_condition_is_defined_before_use(self):
        template = _resolver("createRoom").request_template

        assert template.index("#set( $condition") < template.index("$util.toJson($condition)")
        assert '$util.defaultIfNull($ctx.args.input.id, $util.autoId())' in template
        assert "owner" not in template
