"""Pipeline protocol shared by the command-line tools."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from teams_tools.client import ApiClient
from teams_tools.data import Credentials
from teams_tools.prompt import Prompter

ClientFactory = Callable[[Credentials], ApiClient]


class Pipeline(Protocol):
    """Interface for a prompt-driven API pipeline."""

    async def run(self, prompter: Prompter) -> Any:
        """Collect input, call the API and print the report.

        The prompter is closed exactly once before returning, whatever the
        outcome.

        Args:
            prompter: Interactive channel owned by this run.

        Returns:
            The pipeline's result value.
        """
        ...
