"""Prompter protocol for gathering interactive input."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Prompter(Protocol):
    """Interface for an interactive question/answer channel.

    The owning pipeline must call ``close`` exactly once, on every exit path.
    """

    def ask(self, question: str) -> str:
        """Ask one question and return the raw answer."""
        ...

    def close(self) -> None:
        """Release the channel."""
        ...


def collect(prompter: Prompter, questions: Sequence[str]) -> list[str]:
    """Ask each question in order and return the raw answers.

    No validation is performed; malformed answers surface as API failures.
    """
    return [prompter.ask(question) for question in questions]
