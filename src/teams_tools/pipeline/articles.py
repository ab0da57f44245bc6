"""Article pipeline: list an author's articles and their embedded images."""

from __future__ import annotations

import logging

from teams_tools.client import JSON_CONTENT_TYPE, ApiClient, ApiError, ApiResponseError
from teams_tools.data import Article, Credentials
from teams_tools.pipeline.base import ClientFactory
from teams_tools.prompt import Prompter, collect

ARTICLES_PATH = "/api/v3/articles"

QUESTIONS = (
    "Enter instance FQDN: ",
    "Enter Author ID: ",
    "Enter Bearer Token: ",
)

NO_ARTICLES_MESSAGE = "No articles found or an error occurred."

logger = logging.getLogger(__name__)


async def fetch_articles(client: ApiClient, author_id: str) -> list[Article]:
    """Fetch the articles of one author, newest first.

    Raises:
        ApiError: On transport or parse failure, or if ``items`` is missing
            or an item is malformed.
    """
    data = await client.get(
        ARTICLES_PATH,
        params={"authorId": author_id, "sort": "creation", "order": "desc"},
        content_type=JSON_CONTENT_TYPE,
    )
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ApiResponseError("Error parsing response data: no 'items' in article list")
    try:
        return [Article.from_api(item) for item in items]
    except (AttributeError, TypeError) as e:
        raise ApiResponseError(
            f"Error parsing response data: malformed article item: {e}"
        ) from e


def print_report(articles: list[Article]) -> None:
    """Print the article report.

    An empty list gets the same message whether the call failed or simply
    returned nothing.
    """
    if not articles:
        print(NO_ARTICLES_MESSAGE)
        return

    print(f"Fetched {len(articles)} articles.")
    for article in articles:
        print(f"\nTitle: {article.title}")
        print(f"Owner: {article.owner.name}")
        print(f"Share URL: {article.share_url}")
        if article.image_urls:
            print("Image URLs:")
            for url in article.image_urls:
                print(f"- {url}")
        else:
            print("No images found.")


class ArticleImagePipeline:
    """Prompt for an author, fetch their articles and report image URLs.

    Args:
        client_factory: Builds an ApiClient from the prompted credentials.
    """

    def __init__(self, client_factory: ClientFactory) -> None:
        self._client_factory = client_factory

    async def run(self, prompter: Prompter) -> list[Article]:
        try:
            host, author_id, token = collect(prompter, QUESTIONS)
            credentials = Credentials(host=host.strip(), bearer_token=token.strip())

            articles: list[Article] = []
            try:
                async with self._client_factory(credentials) as client:
                    articles = await fetch_articles(client, author_id.strip())
            except ApiError as e:
                logger.error(str(e))

            print_report(articles)
            return articles
        finally:
            prompter.close()
