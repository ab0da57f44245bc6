"""Prompter backed by standard input/output."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from types import TracebackType

logger = logging.getLogger(__name__)


class ConsolePrompter:
    """Ask questions on the terminal with ``input()``.

    Args:
        input_func: Callable used to read an answer (default: builtin ``input``).
    """

    def __init__(self, *, input_func: Callable[[str], str] = input) -> None:
        self._input = input_func
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, question: str) -> str:
        if self._closed:
            raise RuntimeError("Prompter is closed")
        return self._input(question)

    def close(self) -> None:
        """Release the channel. Calls after the first are no-ops."""
        if self._closed:
            return
        self._closed = True
        sys.stdout.flush()
        logger.debug("Console prompter closed")

    def __enter__(self) -> ConsolePrompter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
