"""Factory functions to create components from configuration."""

from functools import partial

from teams_tools.client import ApiClient
from teams_tools.config.models import ApiConfig, TeamsToolsConfig
from teams_tools.data import Credentials
from teams_tools.pipeline.articles import ArticleImagePipeline
from teams_tools.pipeline.sme import SmeAssignmentPipeline


def create_client(config: ApiConfig, credentials: Credentials) -> ApiClient:
    """Create an API client for the prompted credentials."""
    return ApiClient(
        credentials,
        scheme=config.scheme,
        timeout=config.timeout,
        verify=config.verify,
    )


def create_article_pipeline(config: TeamsToolsConfig) -> ArticleImagePipeline:
    """Create the article pipeline from config."""
    return ArticleImagePipeline(partial(create_client, config.api))


def create_sme_pipeline(config: TeamsToolsConfig) -> SmeAssignmentPipeline:
    """Create the group-assignment pipeline from config."""
    return SmeAssignmentPipeline(
        partial(create_client, config.api),
        lookup_concurrency=config.assign_sme.lookup_concurrency,
    )
