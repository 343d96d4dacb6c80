"""Structural type inference from JSON sample values.

A sample value is classified purely by its runtime kind. Two samples with
the same structure always infer the same type, whatever their contents.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

INDENT = "  "


class ArrayStrategy(str, Enum):
    """How a non-empty array sample picks its element type."""

    FIRST_ELEMENT = "first_element"  # trust value[0], ignore the rest
    UNION = "union"


@dataclass(frozen=True)
class InferredType:
    """One node of an inferred type.

    kind is one of: null, string, number, boolean, unknown, array,
    object, record, union. ``items`` holds the element type of an array
    or the members of a union; ``fields`` the ordered members of an object.
    ``depth`` is the nesting level of an object and only affects rendering.
    """

    kind: str
    items: tuple["InferredType", ...] = ()
    fields: tuple[tuple[str, "InferredType"], ...] = ()
    depth: int = field(default=0, compare=False)

    @property
    def is_object(self) -> bool:
        return self.kind == "object"


NULL = InferredType("null")
STRING = InferredType("string")
NUMBER = InferredType("number")
BOOLEAN = InferredType("boolean")
UNKNOWN = InferredType("unknown")
RECORD = InferredType("record")
EMPTY_ARRAY = InferredType("array", items=(UNKNOWN,))


def infer_type(
    value: Any,
    depth: int = 0,
    strategy: ArrayStrategy = ArrayStrategy.FIRST_ELEMENT,
) -> InferredType:
    """Infer the structural type of a sample value."""
    if value is None:
        return NULL

    if isinstance(value, list):
        if not value:
            return EMPTY_ARRAY
        if strategy == ArrayStrategy.UNION:
            return InferredType("array", items=(_union(value, depth, strategy),))
        return InferredType("array", items=(infer_type(value[0], depth, strategy),))

    if isinstance(value, dict):
        if not value:
            return RECORD
        fields = tuple(
            (str(key), infer_type(val, depth + 1, strategy)) for key, val in value.items()
        )
        return InferredType("object", fields=fields, depth=depth)

    if isinstance(value, str):
        return STRING
    # bool before number: True is an int
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER

    return UNKNOWN


def _union(values: list, depth: int, strategy: ArrayStrategy) -> InferredType:
    members: list[InferredType] = []
    for item in values:
        item_type = infer_type(item, depth, strategy)
        if item_type not in members:
            members.append(item_type)
    if len(members) == 1:
        return members[0]
    return InferredType("union", items=tuple(members))


def render_type(t: InferredType) -> str:
    """Render an inferred type as TypeScript source text."""
    if t.kind == "unknown":
        return "any"
    if t.kind == "record":
        return "Record<string, any>"
    if t.kind == "array":
        item = t.items[0]
        if item.kind == "unknown":
            return "any[]"
        item_text = render_type(item)
        if item.is_object:
            return f"{item_text}[]"
        return f"({item_text})[]"
    if t.kind == "union":
        return " | ".join(render_type(member) for member in t.items)
    if t.is_object:
        spaces = INDENT * t.depth
        props = "\n".join(
            f"{spaces}{INDENT}{_property_name(name)}: {render_type(member)}"
            for name, member in t.fields
        )
        return f"{{\n{props}\n{spaces}}}"
    return t.kind


def _property_name(name: str) -> str:
    if IDENTIFIER.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)
