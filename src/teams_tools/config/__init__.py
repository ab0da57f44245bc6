"""Configuration module for Teams API tools."""

from teams_tools.config.factory import (
    create_article_pipeline,
    create_client,
    create_sme_pipeline,
)
from teams_tools.config.loader import get_default_config_path, load_config
from teams_tools.config.models import (
    ApiConfig,
    AssignSmeConfig,
    LoggingConfig,
    TeamsToolsConfig,
)

__all__ = [
    "ApiConfig",
    "AssignSmeConfig",
    "LoggingConfig",
    "TeamsToolsConfig",
    "create_article_pipeline",
    "create_client",
    "create_sme_pipeline",
    "get_default_config_path",
    "load_config",
]
