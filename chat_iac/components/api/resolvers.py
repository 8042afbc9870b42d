"""
Resolver table for the chat GraphQL API.

Each resolver maps one GraphQL field to a DynamoDB data source through a pair
of VTL mapping templates stored in `mapping_templates/`. The templates are
passed to AppSync verbatim and evaluated by the AppSync runtime.

| Type     | Field               | Data source | Request                         |
|----------|---------------------|-------------|---------------------------------|
| Query    | listMessagesForRoom | Message     | Query messages-by-room-id       |
| Mutation | createMessage       | Message     | PutItem, default id/createdAt   |
| Query    | listRooms           | Room        | Scan, default limit 1000        |
| Mutation | createRoom          | Room        | PutItem, default id             |
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

MAPPING_TEMPLATES_DIR = Path(__file__).parent / "mapping_templates"

MESSAGE_DATASOURCE = "Message"
ROOM_DATASOURCE = "Room"


@lru_cache(maxsize=None)
def load_mapping_template(name: str) -> str:
    """
    Load a VTL mapping template by name.

    Args:
        name: Template file stem (e.g., 'list_rooms.request')

    Returns:
        Template text

    Raises:
        FileNotFoundError: If no template with that name exists
    """
    path = MAPPING_TEMPLATES_DIR / f"{name}.vtl"
    if not path.is_file():
        raise FileNotFoundError(f"Mapping template not found: {path}")
    return path.read_text(encoding="utf-8")


@dataclass(frozen=True)
class ResolverDefinition:
    """A unit resolver binding a GraphQL field to a data source."""
    type_name: str
    field_name: str
    data_source: str
    request_template_name: str
    response_template_name: str

    @property
    def resource_suffix(self) -> str:
        """Stable resource name fragment, e.g. 'query-listrooms'."""
        return f"{self.type_name}-{self.field_name}".lower()

    @property
    def request_template(self) -> str:
        return load_mapping_template(self.request_template_name)

    @property
    def response_template(self) -> str:
        return load_mapping_template(self.response_template_name)


RESOLVERS: tuple[ResolverDefinition, ...] = (
    ResolverDefinition(
        type_name="Query",
        field_name="listMessagesForRoom",
        data_source=MESSAGE_DATASOURCE,
        request_template_name="list_messages_for_room.request",
        response_template_name="error_passthrough.response",
    ),
    ResolverDefinition(
        type_name="Mutation",
        field_name="createMessage",
        data_source=MESSAGE_DATASOURCE,
        request_template_name="create_message.request",
        response_template_name="result_item.response",
    ),
    ResolverDefinition(
        type_name="Query",
        field_name="listRooms",
        data_source=ROOM_DATASOURCE,
        request_template_name="list_rooms.request",
        response_template_name="error_passthrough.response",
    ),
    ResolverDefinition(
        type_name="Mutation",
        field_name="createRoom",
        data_source=ROOM_DATASOURCE,
        request_template_name="create_room.request",
        response_template_name="result_item.response",
    ),
)
