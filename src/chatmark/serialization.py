"""Document serialization: JSON round-trip for chatmark nodes.

A parsed message is often produced on the server and drawn on a client. These
helpers turn a Document into plain JSON data and back, with a ``_type`` key
naming the node class at every level.

Example:
    from chatmark import parse
    from chatmark.serialization import to_json, from_json

    doc = parse("# Hello <@1>")
    assert from_json(to_json(doc)) == doc

Output is deterministic: keys are sorted, so equal Documents give equal JSON.
All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from chatmark import nodes
from chatmark.errors import SerializationError
from chatmark.nodes import Document, Node

_TYPE_KEY = "_type"


def _node_classes() -> dict[str, type]:
    """Every dataclass exported by chatmark.nodes, keyed by class name."""
    classes: dict[str, type] = {}
    for name in nodes.__all__:
        obj = getattr(nodes, name)
        if isinstance(obj, type) and is_dataclass(obj):
            classes[name] = obj
    return classes


_NODE_CLASSES = _node_classes()


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node, and everything under it, to JSON-compatible data."""
    data: dict[str, Any] = {_TYPE_KEY: type(node).__name__}
    for f in fields(node):  # type: ignore[arg-type]
        data[f.name] = _encode(getattr(node, f.name))
    return data


def _encode(value: Any) -> Any:
    match value:
        case tuple():
            return [_encode(item) for item in value]
        case _ if is_dataclass(value) and not isinstance(value, type):
            return to_dict(value)  # type: ignore[arg-type]
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a typed node from data produced by to_dict.

    Fields missing from ``data`` take the node's defaults; unknown keys are
    ignored.

    Raises:
        SerializationError: ``data`` is not a dict, its ``_type`` is missing
            or unknown, or its fields do not fit the node class.

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a dict, got {type(data).__name__}")

    if _TYPE_KEY not in data:
        raise SerializationError(f"Missing '{_TYPE_KEY}' field in serialized node")

    name = data[_TYPE_KEY]
    cls = _NODE_CLASSES.get(name) if isinstance(name, str) else None
    if cls is None:
        raise SerializationError(f"Unknown node type: {name!r}")

    values = {f.name: _decode(data[f.name]) for f in fields(cls) if f.name in data}
    try:
        return cls(**values)
    except TypeError as e:
        raise SerializationError(f"Invalid fields for {name}: {e}") from e


def _decode(value: Any) -> Any:
    match value:
        case dict():
            return from_dict(value)
        case list():
            return tuple(_decode(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string with sorted keys."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: The string is not JSON or its root is not a
            Document.

    """
    try:
        decoded = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    doc = from_dict(decoded)
    if not isinstance(doc, Document):
        raise SerializationError(f"Expected Document, got {type(doc).__name__}")
    return doc


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
