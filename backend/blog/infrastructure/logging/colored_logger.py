"""Colored pipeline logger — ANSI-colored console logging for the backup pipeline.

Provides a PipelineLogger with color-coded output per pipeline stage,
making it easy to visually trace an archive export in the terminal.

Color scheme:
    🟢 Green   — Listing / Completion
    🔵 Blue    — Manifest
    🟡 Yellow  — Per-article entries
    🟠 Cyan    — Info entry / Finalize
    🔴 Red     — Errors
    ⚪ Gray    — Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Pipeline Stage Definitions ───────────────────────────────────────

class BackupStage:
    """Predefined backup stages with colors and icons."""

    LISTING = ("LISTING", _Colors.GREEN, "📚")
    MANIFEST = ("MANIFEST", _Colors.BLUE, "🧾")
    ARTICLES = ("ARTICLES", _Colors.YELLOW, "📄")
    INFO = ("INFO", _Colors.CYAN, "ℹ️")
    FINALIZE = ("FINALIZE", _Colors.CYAN, "🗜️")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for multi-stage jobs.

    Usage:
        log = PipelineLogger("BackupService")
        with log.timed_step(BackupStage.LISTING, "Loading articles"):
            articles = await repository.get_all(params)
        log.detail("Skipped entry", article_id=3)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _format_details(kwargs))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _format_details(kwargs))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a stage failure in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def warning(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a recoverable problem; the pipeline keeps going."""
        label, color, icon = stage
        formatted = f"{color}{icon} [{label}]{_Colors.RESET} {_Colors.YELLOW}⚠ {message}{_Colors.RESET}"
        self._logger.warning(formatted + _format_details(kwargs))

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        self._logger.debug(formatted + _format_details(kwargs))

    def stats(self, **kwargs: Any) -> None:
        """Log statistics / timing information."""
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time; re-raises failures."""
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s")


def _format_details(details: dict[str, Any]) -> str:
    if not details:
        return ""
    joined = " | ".join(f"{k}={v}" for k, v in details.items())
    return f" {_Colors.GRAY}({joined}){_Colors.RESET}"
