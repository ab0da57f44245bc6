"""Teams API tools: interactive scripts for the /api/v3 content API."""

from teams_tools.client import (
    ApiClient,
    ApiError,
    ApiParseError,
    ApiResponseError,
    ApiTransportError,
)
from teams_tools.config import TeamsToolsConfig, load_config
from teams_tools.data import (
    Article,
    AssignmentOutcome,
    Credentials,
    Owner,
    UserGroup,
    UserLookupResult,
)
from teams_tools.extract import extract_image_urls
from teams_tools.pipeline import ArticleImagePipeline, Pipeline, SmeAssignmentPipeline
from teams_tools.prompt import ConsolePrompter, Prompter

__all__ = [
    # Models
    "Article",
    "AssignmentOutcome",
    "Credentials",
    "Owner",
    "UserGroup",
    "UserLookupResult",
    # Protocols
    "Pipeline",
    "Prompter",
    # Client
    "ApiClient",
    "ApiError",
    "ApiParseError",
    "ApiResponseError",
    "ApiTransportError",
    # Components
    "ArticleImagePipeline",
    "ConsolePrompter",
    "SmeAssignmentPipeline",
    "extract_image_urls",
    # Config
    "TeamsToolsConfig",
    "load_config",
]
