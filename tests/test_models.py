"""Tests for data models."""

import pytest

from teams_tools.data import (
    Article,
    AssignmentOutcome,
    Credentials,
    Owner,
    UserGroup,
    UserLookupResult,
)


def test_credentials_repr_hides_token() -> None:
    creds = Credentials(host="teams.example.com", bearer_token="s3cret")
    assert "s3cret" not in repr(creds)
    assert "teams.example.com" in repr(creds)


def test_article_from_api_full() -> None:
    item = {
        "id": 42,
        "title": "Release notes",
        "body": '<p>Intro</p><img src="https://x/1.png">',
        "owner": {"id": 7, "name": "Dana"},
        "viewCount": 120,
        "score": 5,
        "shareUrl": "https://teams.example.com/a/42",
    }
    article = Article.from_api(item)
    assert article.id == 42
    assert article.title == "Release notes"
    assert article.content == item["body"]
    assert article.image_urls == ("https://x/1.png",)
    assert article.owner == Owner(id=7, name="Dana")
    assert article.view_count == 120
    assert article.score == 5
    assert article.share_url == "https://teams.example.com/a/42"


def test_article_from_api_missing_fields() -> None:
    article = Article.from_api({"id": 1})
    assert article.content == ""
    assert article.image_urls == ()
    assert article.owner.name is None
    assert article.share_url is None


def test_article_is_frozen() -> None:
    article = Article.from_api({"id": 1, "title": "t"})
    with pytest.raises(AttributeError):
        article.title = "changed"  # type: ignore[misc]


def test_user_lookup_result_found() -> None:
    assert UserLookupResult(email="a@x.com", user_id="3").found
    assert not UserLookupResult(email="b@x.com").found


def test_assignment_outcome_resolved_ids_keep_order() -> None:
    outcome = AssignmentOutcome(
        lookups=(
            UserLookupResult(email="a@x.com", user_id="3"),
            UserLookupResult(email="b@x.com"),
            UserLookupResult(email="c@x.com", user_id="1"),
        )
    )
    assert outcome.resolved_user_ids == ["3", "1"]
    assert outcome.group is None
    assert outcome.assigned is False


def test_user_group_defaults() -> None:
    group = UserGroup(name="Experts", description="SMEs")
    assert group.member_user_ids == ()
    assert group.id is None
