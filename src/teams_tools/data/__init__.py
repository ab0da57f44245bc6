"""Data models for Teams API tools."""

from teams_tools.data.models import (
    Article,
    AssignmentOutcome,
    Credentials,
    Owner,
    UserGroup,
    UserLookupResult,
)

__all__ = [
    "Article",
    "AssignmentOutcome",
    "Credentials",
    "Owner",
    "UserGroup",
    "UserLookupResult",
]
