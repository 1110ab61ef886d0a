"""Runtime helpers for issueparser CLI orchestration."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

from issueparser.config import (
    CONFIG_DEFAULT,
    ConfigError,
    ParserConfig,
    default_config,
    load_config,
)
from issueparser.errors import InputError, classify_error
from issueparser.logging import configure_logging, get_logger


class _HandlerCallable(Protocol):
    def __call__(self) -> Any: ...


def prepare_config(
    args: Any, *, loader: Callable[[str], ParserConfig] = load_config
) -> ParserConfig:
    """Load configuration for the given argparse namespace.

    An explicit ``--config`` must exist; the implicit default file is optional
    and built-in defaults apply when it is absent.
    """
    if not hasattr(args, "config"):
        raise AttributeError("Command namespace is missing 'config' attribute")
    if args.config is not None:
        cfg = loader(args.config)
    elif Path(CONFIG_DEFAULT).exists():
        cfg = loader(CONFIG_DEFAULT)
    else:
        cfg = default_config()
    level = "WARNING" if getattr(args, "quiet", False) else cfg.logging_level
    configure_logging(json_logging=cfg.logging_json_enabled, level=level)
    return cfg


def exit_code_for(exc: BaseException) -> int:
    """Map a failure to the CLI exit code: 2 for config or input, else 1."""
    return 2 if isinstance(exc, (ConfigError, InputError, OSError)) else 1


def execute_command(
    handler: _HandlerCallable, args: Any, cfg: ParserConfig | None, command: str
) -> int:
    """Execute a command handler, logging its outcome and duration."""
    logger = get_logger()
    start = time.monotonic()
    try:
        result = handler()
        exit_code = int(result) if result is not None else 0
    except SystemExit:
        raise
    except Exception as exc:
        info = classify_error(exc)
        logger.log_error(
            f"command {command} failed",
            error=info.message,
            command=command,
            category=info.category,
            exit_code=exit_code_for(exc),
        )
        raise
    duration_ms = max(0.0, time.monotonic() - start) * 1000
    logger.log_performance(f"command_{command}", duration_ms, exit_code=exit_code)
    return exit_code


__all__ = ["prepare_config", "execute_command", "exit_code_for"]
