from teams_tools.prompt.base import Prompter, collect
from teams_tools.prompt.console import ConsolePrompter

__all__ = ["ConsolePrompter", "Prompter", "collect"]
