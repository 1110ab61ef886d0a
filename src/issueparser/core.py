from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from .config import ParserConfig, default_config, load_config
from .errors import InputError
from .logging import StructuredLogger, get_logger
from .markers import match_marker
from .models import Issue
from .parser import extract_issues

UNCLASSIFIED = "unclassified"


def _count(keys: Iterable[str | None], table: Mapping[str, str]) -> dict[str, int]:
    counts = dict.fromkeys(table.values(), 0)
    counts[UNCLASSIFIED] = 0
    for key in keys:
        counts[key or UNCLASSIFIED] += 1
    return counts


class IssueExtractor:
    """Configured entry point around :func:`issueparser.parser.extract_issues`.

    Holds the marker tables from configuration and logs one timing entry per
    call. Each call starts from scratch; nothing is cached between calls.
    """

    def __init__(
        self, config: ParserConfig | None = None, logger: StructuredLogger | None = None
    ) -> None:
        self.config = config or default_config()
        self._logger = logger

    @classmethod
    def from_config_path(cls, path: str | Path) -> IssueExtractor:
        return cls(load_config(path))

    @property
    def logger(self) -> StructuredLogger:
        return self._logger or get_logger()

    def extract(self, text: str) -> list[Issue]:
        with self.logger.timed_operation("extract") as result:
            issues = extract_issues(
                text,
                type_markers=self.config.type_markers,
                status_markers=self.config.status_markers,
            )
            result["line_count"] = text.count("\n") + 1 if text else 0
            result["issue_count"] = len(issues)
        return issues

    def summarize(self, issues: list[Issue]) -> dict[str, dict[str, int]]:
        """Count issues per type and status category.

        Every configured category appears (possibly with 0); records whose
        line matched no marker are counted under ``unclassified``.
        """
        return {
            "types": _count(
                (match_marker(i.type, self.config.type_markers) for i in issues),
                self.config.type_markers,
            ),
            "statuses": _count(
                (match_marker(i.status, self.config.status_markers) for i in issues),
                self.config.status_markers,
            ),
        }

    def read_source(self, path: str | Path | None = None) -> str:
        target = Path(path) if path is not None else self.config.source_file
        if target is None:
            raise InputError("No input given and no source file configured")
        try:
            return target.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise InputError(f"Cannot read input {target}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise InputError(f"Input {target} is not valid UTF-8: {exc.reason}") from exc

    def extract_file(self, path: str | Path | None = None) -> list[Issue]:
        return self.extract(self.read_source(path))


__all__ = ["IssueExtractor", "UNCLASSIFIED"]
