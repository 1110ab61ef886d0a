"""JSON Schemas for issueparser artifacts.

The export schema mirrors :meth:`issueparser.models.Issue.to_dict`. Values are
free-form strings because the extractor never validates dates or names.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

from .schema_registry import get_schema_descriptor

SCHEMA_KEY = "$schema"
SCHEMA_URL = "http://json-schema.org/draft-07/schema#"

_STRING_FIELDS = ("title", "createdBy", "createdAt", "updatedAt", "type", "status")


def get_schemas() -> dict[str, Any]:
    """Return a mapping of schema name -> JSON Schema dictionary."""
    export_descriptor = get_schema_descriptor("export")
    properties: dict[str, Any] = {"id": {"type": "integer"}}
    properties.update({name: {"type": "string"} for name in _STRING_FIELDS})
    properties["assignedTo"] = {"type": "string"}
    export_schema: dict[str, Any] = {
        SCHEMA_KEY: SCHEMA_URL,
        "$comment": f"issueparser export schema v{export_descriptor.version}",
        "title": "IssueExport",
        "type": "array",
        "items": {
            "type": "object",
            "required": ["id", *_STRING_FIELDS],
            "properties": properties,
            "additionalProperties": False,
        },
    }
    return {"export": export_schema}


def validate_export(payload: Any) -> list[str]:
    """Return human-readable schema violations for an export payload."""
    validator = Draft7Validator(get_schemas()["export"])
    errors = sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path))
    messages: list[str] = []
    for err in errors:
        location = "/".join(str(p) for p in err.absolute_path) or "<root>"
        messages.append(f"{location}: {err.message}")
    return messages


__all__ = ["get_schemas", "validate_export"]
