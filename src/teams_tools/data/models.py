"""Core data models for Teams API tools.

All entities are request-scoped: built from prompts or API responses, held in
memory for one run, never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from teams_tools.extract.images import extract_image_urls


@dataclass(frozen=True)
class Credentials:
    """Host and bearer token for one API instance."""

    host: str
    bearer_token: str = field(repr=False)


@dataclass(frozen=True)
class Owner:
    """Author of an article as returned by the API."""

    id: int | None = None
    name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> Owner:
        if not data:
            return cls()
        return cls(id=data.get("id"), name=data.get("name"))


@dataclass(frozen=True)
class Article:
    """An article with the image URLs found in its body."""

    id: int | None
    title: str | None
    content: str
    image_urls: tuple[str, ...] = ()
    owner: Owner = field(default_factory=Owner)
    view_count: int | None = None
    score: int | None = None
    share_url: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> Article:
        """Build an Article from one entry of the ``items`` list.

        Args:
            item: Raw article object from ``GET /api/v3/articles``.

        Returns:
            Article with ``image_urls`` extracted from the ``body`` field.
        """
        body = item.get("body") or ""
        return cls(
            id=item.get("id"),
            title=item.get("title"),
            content=body,
            image_urls=tuple(extract_image_urls(body)),
            owner=Owner.from_api(item.get("owner")),
            view_count=item.get("viewCount"),
            score=item.get("score"),
            share_url=item.get("shareUrl"),
        )


@dataclass(frozen=True)
class UserLookupResult:
    """Outcome of resolving one email address.

    ``user_id`` is None when the user was not found or the lookup failed.
    """

    email: str
    user_id: str | None = None

    @property
    def found(self) -> bool:
        return self.user_id is not None


@dataclass(frozen=True)
class UserGroup:
    """A user group; ``id`` is assigned by the server on creation."""

    name: str
    description: str
    member_user_ids: tuple[str, ...] = ()
    id: int | str | None = None


@dataclass(frozen=True)
class AssignmentOutcome:
    """Result of one group-assignment run."""

    lookups: tuple[UserLookupResult, ...] = ()
    group: UserGroup | None = None
    assigned: bool = False

    @property
    def resolved_user_ids(self) -> list[str]:
        return [r.user_id for r in self.lookups if r.user_id is not None]
