"""issueparser - extract structured issue records from pasted tracker text.

High-level public API:

from issueparser import extract_issues

issues = extract_issues(pasted_text)
for issue in issues:
    print(issue.id, issue.title, issue.status)

For configured marker tables and timing logs use ``IssueExtractor``:

extractor = IssueExtractor.from_config_path('issue_parser.config.yaml')
issues = extractor.extract_file('tickets.txt')

The CLI (``issueparser`` / ``python -m issueparser``) delegates to this library.
"""

from __future__ import annotations

from .config import ParserConfig, load_config
from .core import IssueExtractor
from .models import Issue
from .parser import extract_issues

__version__ = "0.1.0"

__all__ = [
    "extract_issues",
    "Issue",
    "IssueExtractor",
    "load_config",
    "ParserConfig",
    "__version__",
]
