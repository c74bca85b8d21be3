"""Graph accessor over JSON-LD expanded form.

Implements GraphAccessorProtocol for nodes as produced by JSON-LD
expansion and loaded with json.loads:

    {
        "@id": "...",
        "@type": ["https://.../CIP-0100/README.md#OtherReference"],
        "https://.../CIP-0100/README.md#reference-label": [{"@value": "CIP-100"}],
        "https://.../CIP-0100/README.md#authors": [{...node...}, {...node...}]
    }

Value objects carry "@value"; list objects carry "@list"; every other
object is a node.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

VALUE_KEY: str = "@value"
LIST_KEY: str = "@list"
TYPE_KEY: str = "@type"


def _is_value_object(value: Any) -> bool:
    return isinstance(value, Mapping) and VALUE_KEY in value


def _is_list_object(value: Any) -> bool:
    return isinstance(value, Mapping) and LIST_KEY in value


class ExpandedGraphAccessor:
    """Reads predicate-keyed values from expanded JSON-LD nodes.

    Stateless; a single instance may be shared freely.
    """

    def get_all(self, node: Any, predicate_id: str) -> Sequence[Any]:
        """Get every value bound to a predicate, in source order.

        A bare (non-array) binding counts as a single value, and "@list"
        objects are spliced in place with their order preserved.
        """
        if not isinstance(node, Mapping):
            return ()
        bound = node.get(predicate_id)
        if bound is None:
            return ()
        if not isinstance(bound, list):
            bound = [bound]

        values: list[Any] = []
        for entry in bound:
            if _is_list_object(entry):
                items = entry[LIST_KEY]
                values.extend(items if isinstance(items, list) else [items])
            else:
                values.append(entry)
        return tuple(values)

    def get_first(self, node: Any, predicate_id: str) -> Any | None:
        """Get the first value bound to a predicate, or None."""
        values = self.get_all(node, predicate_id)
        return values[0] if values else None

    def as_string(self, value: Any) -> str | None:
        """Return the string held by a value object, or None."""
        if not _is_value_object(value):
            return None
        scalar = value[VALUE_KEY]
        return scalar if isinstance(scalar, str) else None

    def as_subnode(self, value: Any) -> Mapping[str, Any] | None:
        """Return value if it is a node object, or None."""
        if not isinstance(value, Mapping):
            return None
        if _is_value_object(value) or _is_list_object(value):
            return None
        return value

    def type_tags(self, node: Any) -> Sequence[Any]:
        """Return every "@type" entry of the node, in source order.

        A bare (non-array) declaration counts as a single entry.
        """
        if not isinstance(node, Mapping):
            return ()
        declared = node.get(TYPE_KEY)
        if declared is None:
            return ()
        if not isinstance(declared, list):
            return (declared,)
        return tuple(declared)
