"""TypeScript declaration document: named request/response types plus the endpoint map."""

from enum import Enum

from api_mock_gen.generator.inference import InferredType, render_type
from api_mock_gen.generator.naming import function_name, type_name
from api_mock_gen.parser.base import Endpoint

HEADER = "// Auto-generated TypeScript types from API specification\n\n"


class CollisionPolicy(str, Enum):
    """What to do when two endpoints derive the same type name."""

    FIRST_WINS = "first_wins"
    LAST_WINS = "last_wins"


class TypeTable:
    """Ordered mapping of derived type name to inferred type."""

    def __init__(self, policy: CollisionPolicy = CollisionPolicy.FIRST_WINS):
        self.policy = policy
        self._types: dict[str, InferredType] = {}

    def register(self, name: str, value_type: InferredType) -> bool:
        """Add a named type. Returns False when an existing entry was kept."""
        if name in self._types and self.policy == CollisionPolicy.FIRST_WINS:
            return False
        # Re-assigning an existing key keeps its position.
        self._types[name] = value_type
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __getitem__(self, name: str) -> InferredType:
        return self._types[name]

    def __len__(self) -> int:
        return len(self._types)

    def items(self):
        return self._types.items()

    def names(self) -> list[str]:
        return list(self._types)


def render_declaration(name: str, value_type: InferredType) -> str:
    """Interfaces for non-empty objects, type aliases for everything else."""
    if value_type.is_object:
        return f"export interface {name} {render_type(value_type)}\n"
    return f"export type {name} = {render_type(value_type)}\n"


def render_endpoint_entry(endpoint: Endpoint) -> str:
    fn = function_name(endpoint.method, endpoint.path)
    response = type_name(endpoint.path, "Response")
    if endpoint.has_request_body:
        request = type_name(endpoint.path, "Request")
        return f"  {fn}: (body: {request}) => Promise<{response}>\n"
    return f"  {fn}: () => Promise<{response}>\n"


def render_declarations(table: TypeTable, endpoints: list[Endpoint]) -> str:
    """Render the full declarations document."""
    parts = [HEADER]
    for name, value_type in table.items():
        parts.append(render_declaration(name, value_type) + "\n")

    parts.append("// API function types\n")
    parts.append("export interface ApiEndpoints {\n")
    for endpoint in endpoints:
        parts.append(render_endpoint_entry(endpoint))
    parts.append("}\n")
    return "".join(parts)
