"""issueparser CLI.

Subcommands:
  parse     -> print extracted issues as a table
  export    -> write extracted issues as JSON (schema-validated)
  report    -> write a standalone HTML table
  summary   -> counts per type / status category
  schema    -> write the export JSON Schema
  validate  -> check an exported JSON file against the schema

Input is a file path, ``-`` for stdin, or (when omitted) the configured
``source.file``; without one, stdin is read.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from issueparser.config import CONFIG_DEFAULT, ConfigError, ParserConfig
from issueparser.core import IssueExtractor
from issueparser.errors import InputError
from issueparser.models import Issue
from issueparser.render import render_html, render_table
from issueparser.runtime import execute_command, exit_code_for, prepare_config
from issueparser.schemas import get_schemas, validate_export
from issueparser.ux import print_counts, print_error, print_header, print_success

_MAX_HELP_WIDTH = 100


class _HelpFormatter(argparse.HelpFormatter):
    def __init__(self, prog: str) -> None:
        super().__init__(prog, max_help_position=30, width=_MAX_HELP_WIDTH)


class _FormatterArgumentParser(argparse.ArgumentParser):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("formatter_class", _HelpFormatter)
        super().__init__(*args, **kwargs)


def _add_common(sp: argparse.ArgumentParser, with_input: bool = True) -> None:
    sp.add_argument(
        "--config",
        default=None,
        help=f"Config file (default: {CONFIG_DEFAULT} when present)",
    )
    if with_input:
        sp.add_argument("input", nargs="?", help="Text file to parse ('-' for stdin)")


def _build_parser() -> argparse.ArgumentParser:
    p = _FormatterArgumentParser(
        prog="issueparser", description="Extract issue records from pasted tracker text"
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output (env: ISSUEPARSER_QUIET=1)",
    )
    sub = p.add_subparsers(
        dest="cmd",
        required=True,
        parser_class=_FormatterArgumentParser,
        metavar="<command>",
    )

    pp = sub.add_parser("parse", help="Print extracted issues as a table")
    _add_common(pp)

    pe = sub.add_parser("export", help="Export extracted issues to JSON")
    _add_common(pe)
    pe.add_argument("--output", help="Output file ('-' for stdout)")
    pe.add_argument("--pretty", action="store_true")

    pr = sub.add_parser("report", help="Write an HTML table of extracted issues")
    _add_common(pr)
    pr.add_argument("--output", help="Output HTML file")
    pr.add_argument("--title", default="Processed Issues")

    psm = sub.add_parser("summary", help="Count issues per type and status")
    _add_common(psm)

    psc = sub.add_parser("schema", help="Write the export JSON Schema")
    _add_common(psc, with_input=False)
    psc.add_argument("--stdout", action="store_true", help="Print instead of writing a file")

    pv = sub.add_parser("validate", help="Validate an exported JSON file")
    _add_common(pv, with_input=False)
    pv.add_argument("file", help="Export JSON file to check")

    return p


def _quiet(args: argparse.Namespace) -> bool:
    return bool(args.quiet) or os.environ.get("ISSUEPARSER_QUIET") == "1"


def _load_issues(extractor: IssueExtractor, args: argparse.Namespace) -> list[Issue]:
    source = args.input
    if source == "-" or (source is None and extractor.config.source_file is None):
        return extractor.extract(sys.stdin.read())
    return extractor.extract_file(source)


def _write_output(out_path: Path, text: str) -> None:
    try:
        out_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot write output {out_path}: {exc.strerror or exc}") from exc


def _cmd_parse(cfg: ParserConfig, args: argparse.Namespace) -> int:
    extractor = IssueExtractor(cfg)
    issues = _load_issues(extractor, args)
    if not _quiet(args):
        print_header(f"Processed Issues ({len(issues)} total)")
    sys.stdout.write(render_table(issues, placeholder=cfg.placeholder))
    return 0


def _cmd_export(cfg: ParserConfig, args: argparse.Namespace) -> int:
    extractor = IssueExtractor(cfg)
    issues = _load_issues(extractor, args)
    data = [issue.to_dict() for issue in issues]
    problems = validate_export(data)
    if problems:
        for problem in problems:
            print_error(f"export schema violation: {problem}")
        return 1
    text = json.dumps(data, indent=2 if args.pretty else None, ensure_ascii=False) + "\n"
    target = args.output or cfg.export_json
    if target == "-":
        sys.stdout.write(text)
        return 0
    out_path = Path(target)
    _write_output(out_path, text)
    if not _quiet(args):
        print_success(f"Exported {len(data)} issues to {out_path}")
    else:
        print(f"[export] {len(data)} issues -> {out_path}")
    return 0


def _cmd_report(cfg: ParserConfig, args: argparse.Namespace) -> int:
    extractor = IssueExtractor(cfg)
    issues = _load_issues(extractor, args)
    out_path = Path(args.output or cfg.report_html)
    _write_output(out_path, render_html(issues, title=args.title, placeholder=cfg.placeholder))
    if not _quiet(args):
        print_success(f"Wrote report with {len(issues)} issues to {out_path}")
    else:
        print(f"[report] {len(issues)} issues -> {out_path}")
    return 0


def _cmd_summary(cfg: ParserConfig, args: argparse.Namespace) -> int:
    extractor = IssueExtractor(cfg)
    issues = _load_issues(extractor, args)
    counts = extractor.summarize(issues)
    if _quiet(args):
        print(f"Total: {len(issues)}")
        for group in ("types", "statuses"):
            for key, value in counts[group].items():
                print(f"{group}.{key}={value}")
        return 0
    print_header(f"Issue Summary ({len(issues)} total)")
    print_counts("Types", list(counts["types"].items()))
    print_counts("Statuses", list(counts["statuses"].items()))
    return 0


def _cmd_schema(cfg: ParserConfig, args: argparse.Namespace) -> int:
    schema = get_schemas()["export"]
    text = json.dumps(schema, indent=2, ensure_ascii=False) + "\n"
    if args.stdout:
        sys.stdout.write(text)
        return 0
    out_path = Path(cfg.schema_file)
    _write_output(out_path, text)
    if not _quiet(args):
        print_success(f"Wrote export schema to {out_path}")
    else:
        print(f"[schema] {out_path}")
    return 0


def _cmd_validate(cfg: ParserConfig, args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        print_error(f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})")
        return 1
    problems = validate_export(payload)
    if problems:
        for problem in problems:
            print_error(problem)
        return 1
    if not _quiet(args):
        print_success(f"{path} matches the export schema ({len(payload)} issues)")
    else:
        print("[validate] ok")
    return 0


def _build_handlers(args: argparse.Namespace, cfg: ParserConfig) -> dict[str, Any]:
    return {
        "parse": lambda: _cmd_parse(cfg, args),
        "export": lambda: _cmd_export(cfg, args),
        "report": lambda: _cmd_report(cfg, args),
        "summary": lambda: _cmd_summary(cfg, args),
        "schema": lambda: _cmd_schema(cfg, args),
        "validate": lambda: _cmd_validate(cfg, args),
    }


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.quiet and os.environ.get("ISSUEPARSER_QUIET") == "1":
        args.quiet = True
    try:
        cfg = prepare_config(args)
    except ConfigError as exc:
        print_error(str(exc))
        return 2
    handler = _build_handlers(args, cfg).get(args.cmd)
    if handler is None:  # pragma: no cover - argparse enforces valid choices
        parser.print_help()
        return 1
    try:
        return execute_command(handler, args, cfg, args.cmd)
    except (InputError, OSError) as exc:
        print_error(str(exc))
        return exit_code_for(exc)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
