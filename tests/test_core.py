from __future__ import annotations

import json
from pathlib import Path

import pytest

from issueparser import IssueExtractor
from issueparser.config import default_config
from issueparser.core import UNCLASSIFIED
from issueparser.errors import InputError
from issueparser.logging import StructuredLogger


def test_extract_logs_counts(capsys: pytest.CaptureFixture[str], sample_text: str) -> None:
    logger = StructuredLogger(name="test-core", json_logging=True, level="INFO")
    extractor = IssueExtractor(logger=logger)

    issues = extractor.extract(sample_text)

    assert [i.id for i in issues] == [101, 102]
    entries = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line]
    assert entries[0]["operation"] == "extract_start"
    assert entries[-1]["operation"] == "extract"
    assert entries[-1]["issue_count"] == 2
    assert entries[-1]["line_count"] == sample_text.count("\n") + 1


def test_extract_uses_configured_markers() -> None:
    cfg = default_config()
    cfg.status_markers = {"Blocked": "blocked"}
    extractor = IssueExtractor(cfg)
    (issue,) = extractor.extract("T\n#1\nDone\nBlocked by infra")
    assert issue.status == "Blocked by infra"


def test_extract_file_reads_utf8(tmp_path: Path, sample_text: str) -> None:
    path = tmp_path / "tickets.txt"
    path.write_text(sample_text, encoding="utf-8")
    issues = IssueExtractor().extract_file(path)
    assert issues[0].type == "🐞 Bug"


def test_extract_file_strips_byte_order_mark(tmp_path: Path, sample_text: str) -> None:
    path = tmp_path / "tickets.txt"
    path.write_text(sample_text, encoding="utf-8-sig")
    issues = IssueExtractor().extract_file(path)
    assert issues[0].title == "Fix login bug"
    assert issues[0].id == 101


def test_extract_file_falls_back_to_configured_source(tmp_path: Path) -> None:
    path = tmp_path / "tickets.txt"
    path.write_text("Title\n#5\n", encoding="utf-8")
    cfg = default_config()
    cfg.source_file = path
    assert IssueExtractor(cfg).extract_file()[0].id == 5


def test_extract_file_missing_raises_input_error(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="Cannot read input"):
        IssueExtractor().extract_file(tmp_path / "missing.txt")


def test_extract_file_without_any_source_raises() -> None:
    with pytest.raises(InputError, match="no source file configured"):
        IssueExtractor().extract_file()


def test_extract_file_rejects_binary(tmp_path: Path) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(InputError, match="not valid UTF-8"):
        IssueExtractor().extract_file(path)


def test_summarize_counts_categories(sample_text: str) -> None:
    extractor = IssueExtractor()
    issues = extractor.extract(sample_text + "Untyped\n#103\n")
    counts = extractor.summarize(issues)
    assert counts["types"]["bug"] == 1
    assert counts["types"]["user_story"] == 1
    assert counts["types"]["epic"] == 0
    assert counts["types"][UNCLASSIFIED] == 1
    assert counts["statuses"]["done"] == 1
    assert counts["statuses"]["in_testing"] == 1
    assert counts["statuses"][UNCLASSIFIED] == 1


def test_from_config_path(tmp_path: Path) -> None:
    path = tmp_path / "issue_parser.config.yaml"
    path.write_text("markers:\n  types: ['⭐ Feature']\n", encoding="utf-8")
    extractor = IssueExtractor.from_config_path(path)
    assert extractor.config.type_markers == {"⭐ Feature": "feature"}
