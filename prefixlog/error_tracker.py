# prefixlog/error_tracker.py
"""Collect errors during a run and report them through a prefixed logger."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from prefixlog.errors import get_error, get_error_stack
from prefixlog.logger import Logger, Logging


@dataclass(slots=True)
class ErrorTracker:
    """Collect exceptions (or any error-like value) grouped by key."""

    context: str = "ErrorTracker"
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def log(self) -> Logging:
        return Logger.with_prefix(self.context)

    def record(self, key: str, error: object) -> None:
        message = get_error(error)
        self.log.error("%s: %s", key, message)
        self.errors.setdefault(key, []).append(message)

    def summary(self) -> Dict[str, List[str]]:
        if not self.errors:
            self.log.debug("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            self.log.warn("Encountered %d issues for %s", len(messages), key)
        return dict(self.errors)


@contextmanager
def error_scope(name: str = "scope", *, reraise: bool = True) -> Iterator[None]:
    """Log any exception escaping the block with its traceback.

    The exception is re-raised unless ``reraise`` is False.
    """
    try:
        yield
    except Exception as exc:
        Logger.with_prefix(name).error("Traceback:\n%s", get_error_stack(exc))
        if reraise:
            raise


__all__ = ["ErrorTracker", "error_scope"]
