from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

from .markers import STATUS_MARKERS, TYPE_MARKERS, build_marker_table

CONFIG_DEFAULT = "issue_parser.config.yaml"


class ConfigError(RuntimeError):
    pass


@dataclass
class ParserConfig:
    version: int = 1
    source_file: Path | None = None
    type_markers: dict[str, str] = field(default_factory=lambda: dict(TYPE_MARKERS))
    status_markers: dict[str, str] = field(default_factory=lambda: dict(STATUS_MARKERS))
    export_json: str = "issues_export.json"
    report_html: str = "issues_report.html"
    schema_file: str = "issues_export.schema.json"
    placeholder: str = "-"
    # Logging configuration
    logging_json_enabled: bool = False
    logging_level: str = "INFO"


def default_config() -> ParserConfig:
    return ParserConfig()


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return cast(dict[str, Any], value)


def _markers(section: dict[str, Any], key: str, fallback: dict[str, str]) -> dict[str, str]:
    if key not in section or section[key] is None:
        return dict(fallback)
    value = section[key]
    if isinstance(value, str) or not isinstance(value, (dict, list)):
        raise ConfigError(f"markers.{key} must be a mapping or a list of labels")
    table = build_marker_table(value)
    if not table:
        raise ConfigError(f"markers.{key} must not be empty")
    return table


def _version(raw: dict[str, Any]) -> int:
    value = raw.get("version", 1)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f"version must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"version must be an integer, got {value!r}") from exc


def _path_value(section: dict[str, Any], name: str, key: str, default: str | None) -> str | None:
    value = section.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{name}.{key} must be a non-empty string, got {value!r}")
    return value


def load_config(path: str | Path) -> ParserConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")
    try:
        loaded = yaml.safe_load(p.read_text(encoding="utf-8-sig")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration root in {p} must be a mapping")
    raw = cast(dict[str, Any], loaded)
    src = _section(raw, "source")
    markers = _section(raw, "markers")
    out = _section(raw, "output")
    logging_config = _section(raw, "logging")

    source_name = _path_value(src, "source", "file", None)
    return ParserConfig(
        version=_version(raw),
        source_file=p.parent / source_name if source_name else None,
        type_markers=_markers(markers, "types", dict(TYPE_MARKERS)),
        status_markers=_markers(markers, "statuses", dict(STATUS_MARKERS)),
        export_json=cast(str, _path_value(out, "output", "export_json", "issues_export.json")),
        report_html=cast(str, _path_value(out, "output", "report_html", "issues_report.html")),
        schema_file=cast(
            str, _path_value(out, "output", "schema_file", "issues_export.schema.json")
        ),
        placeholder=str(out.get("placeholder", "-")),
        logging_json_enabled=bool(logging_config.get("json_enabled", False)),
        logging_level=str(logging_config.get("level", "INFO")),
    )


__all__ = ["CONFIG_DEFAULT", "ConfigError", "ParserConfig", "default_config", "load_config"]
