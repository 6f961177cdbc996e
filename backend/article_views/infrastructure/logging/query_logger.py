"""Colored query logger — traces which path an article listing took.

Color scheme:
    🟢 Green   — Native paginated query
    🟡 Yellow  — Filter API fallback (in-memory slice)
    🔵 Blue    — Site resolution
    🟣 Magenta — Content resolution
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


class QueryStage:
    """Query path stages with colors and icons."""

    NATIVE = ("NATIVE", _Colors.GREEN, "⚡")
    FALLBACK = ("FALLBACK", _Colors.YELLOW, "🧮")
    SITE = ("SITE", _Colors.BLUE, "🌐")
    RESOLVE = ("RESOLVE", _Colors.MAGENTA, "📰")
    ERROR = ("ERROR", _Colors.RED, "❌")


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


class QueryLogger:
    """Color-coded logger for article query composition.

    Usage:
        log = QueryLogger("ArticleQueryComposer")
        with log.timed(QueryStage.NATIVE, "Listing live articles", locale="en"):
            articles = await repository.list_live(...)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.debug(
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}{_format_kwargs(kwargs)}"
        )

    def warning(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, color, icon = stage
        formatted = f"{color}{icon} [{label}]{_Colors.RESET} {_Colors.RED}{message}{_Colors.RESET}"
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    @contextmanager
    def timed(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Log the step with elapsed time; failures are logged and re-raised."""
        label, color, icon = stage
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self._logger.error(
                f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
                f"{_Colors.RED}{message} — failed after {elapsed:.3f}s{_Colors.RESET}"
                f" {_Colors.DIM}→ {type(e).__name__}: {e}{_Colors.RESET}"
            )
            raise
        else:
            elapsed = time.perf_counter() - start
            self._logger.info(
                f"{color}{icon} [{label}]{_Colors.RESET} "
                f"{message} — {elapsed:.3f}s{_format_kwargs(kwargs)}"
            )
