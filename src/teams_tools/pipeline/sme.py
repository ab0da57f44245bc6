"""Group-assignment pipeline: resolve emails, create a user group, make it SME on a tag."""

from __future__ import annotations

import asyncio
import logging

from teams_tools.client import (
    JSON_CONTENT_TYPE,
    JSON_PATCH_CONTENT_TYPE,
    ApiClient,
    ApiError,
)
from teams_tools.data import AssignmentOutcome, Credentials, UserGroup, UserLookupResult
from teams_tools.pipeline.base import ClientFactory
from teams_tools.prompt import Prompter, collect

USER_BY_EMAIL_PATH = "/api/v3/users/by-email/{email}"
USER_GROUPS_PATH = "/api/v3/user-groups"
TAG_SME_GROUPS_PATH = "/api/v3/tags/{tag_id}/subject-matter-experts/user-groups"

QUESTIONS = (
    "Enter the Fully Qualified Domain Name (FQDN): ",
    "Enter your Bearer Token: ",
    "Enter comma-separated user email addresses: ",
    "Enter the tag ID: ",
    "Enter the name for the user group: ",
    "Enter a description for the user group: ",
)

NO_USERS_MESSAGE = "No valid user IDs found."

logger = logging.getLogger(__name__)


def split_emails(raw: str) -> list[str]:
    """Split a comma-separated email list, trimming each entry.

    Order and duplicates are preserved; empty segments are kept as "".
    """
    return [email.strip() for email in raw.split(",")]


async def lookup_user_id(client: ApiClient, email: str) -> UserLookupResult:
    """Resolve one email to a user ID. Failures yield a result with no ID."""
    try:
        data = await client.get(USER_BY_EMAIL_PATH.format(email=email))
    except ApiError as e:
        logger.error(f"Error fetching user ID for email {email}: {e}")
        return UserLookupResult(email=email)

    logger.debug(f"Response for email {email}: {data}")
    user_id = data.get("id") if isinstance(data, dict) else None
    if not user_id:
        logger.warning(f"User ID not found for email: {email}")
        return UserLookupResult(email=email)
    return UserLookupResult(email=email, user_id=str(user_id))


async def create_user_group(
    client: ApiClient,
    name: str,
    description: str,
    user_ids: list[str],
) -> UserGroup | None:
    """Create a user group from resolved IDs.

    Returns:
        The created group with its server-assigned id, or None on failure.
    """
    body = {"name": name, "description": description, "userIds": user_ids}
    try:
        response = await client.post(
            USER_GROUPS_PATH, body, content_type=JSON_PATCH_CONTENT_TYPE
        )
    except ApiError as e:
        logger.error(f"Error creating user group: {e}")
        return None

    group_id = response.get("id") if isinstance(response, dict) else None
    if not group_id:
        logger.error(f"Error creating user group: no id in response {response}")
        return None

    print(f"User group created successfully: {response}")
    return UserGroup(
        name=name,
        description=description,
        member_user_ids=tuple(user_ids),
        id=group_id,
    )


async def assign_group_to_tag(client: ApiClient, group_id: int | str, tag_id: str) -> bool:
    """Assign one user group as subject-matter experts on a tag.

    The endpoint takes an array even for a single group.
    """
    try:
        response = await client.post(
            TAG_SME_GROUPS_PATH.format(tag_id=tag_id),
            [group_id],
            content_type=JSON_CONTENT_TYPE,
        )
    except ApiError as e:
        logger.error(f"Error assigning user group to tag: {e}")
        return False

    print(f"User group assigned to tag successfully: {response}")
    return True


class SmeAssignmentPipeline:
    """Resolve emails to users, group them and attach the group to a tag.

    Lookups run one at a time unless ``lookup_concurrency`` is raised, in
    which case up to that many run at once and results keep email order.

    Args:
        client_factory: Builds an ApiClient from the prompted credentials.
        lookup_concurrency: Maximum concurrent user lookups (default 1).
    """

    def __init__(self, client_factory: ClientFactory, *, lookup_concurrency: int = 1) -> None:
        if lookup_concurrency < 1:
            raise ValueError("lookup_concurrency must be at least 1")
        self._client_factory = client_factory
        self._lookup_concurrency = lookup_concurrency

    async def run(self, prompter: Prompter) -> AssignmentOutcome:
        try:
            host, token, raw_emails, tag_id, group_name, group_description = collect(
                prompter, QUESTIONS
            )
            credentials = Credentials(host=host.strip(), bearer_token=token.strip())
            emails = split_emails(raw_emails)

            try:
                client = self._client_factory(credentials)
            except ApiError as e:
                logger.error(str(e))
                return AssignmentOutcome()

            async with client:
                return await self._assign(
                    client,
                    emails,
                    tag_id=tag_id.strip(),
                    group_name=group_name,
                    group_description=group_description,
                )
        finally:
            prompter.close()

    async def _assign(
        self,
        client: ApiClient,
        emails: list[str],
        *,
        tag_id: str,
        group_name: str,
        group_description: str,
    ) -> AssignmentOutcome:
        lookups = await self._lookup_all(client, emails)
        outcome = AssignmentOutcome(lookups=tuple(lookups))

        user_ids = outcome.resolved_user_ids
        if not user_ids:
            print(NO_USERS_MESSAGE)
            return outcome

        group = await create_user_group(client, group_name, group_description, user_ids)
        if group is None:
            return outcome

        assigned = await assign_group_to_tag(client, group.id, tag_id)
        return AssignmentOutcome(lookups=outcome.lookups, group=group, assigned=assigned)

    async def _lookup_all(self, client: ApiClient, emails: list[str]) -> list[UserLookupResult]:
        if self._lookup_concurrency == 1:
            return [await lookup_user_id(client, email) for email in emails]

        semaphore = asyncio.Semaphore(self._lookup_concurrency)

        async def bounded(email: str) -> UserLookupResult:
            async with semaphore:
                return await lookup_user_id(client, email)

        # gather preserves input order
        return list(await asyncio.gather(*(bounded(email) for email in emails)))
