"""Central schema registry with version metadata and filenames."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SchemaDescriptor:
    """Describes a schema artifact shipped with issueparser."""

    name: str
    version: str
    filename: str
    description: str


_REGISTRY: dict[str, SchemaDescriptor] = {
    "export": SchemaDescriptor(
        name="export",
        version="1",
        filename="issues_export.schema.json",
        description="JSON export of issue records extracted from pasted text.",
    ),
}


def get_schema_descriptor(name: str) -> SchemaDescriptor:
    try:
        descriptor = _REGISTRY[name]
    except KeyError as exc:
        raise KeyError(f"Unknown schema '{name}'") from exc
    return replace(descriptor)


def iter_schema_descriptors() -> Iterable[SchemaDescriptor]:
    for descriptor in _REGISTRY.values():
        yield replace(descriptor)


__all__ = ["SchemaDescriptor", "get_schema_descriptor", "iter_schema_descriptors"]
