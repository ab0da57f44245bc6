"""Pydantic configuration models for Teams API tools."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# API Client Config
# ============================================================


class ApiConfig(BaseModel):
    """Configuration for ApiClient.

    ``timeout`` of None disables request timeouts entirely.
    """

    scheme: Literal["https", "http"] = "https"
    timeout: float | None = None
    verify: bool = True

    model_config = {"frozen": True}


# ============================================================
# Pipeline Configs
# ============================================================


class AssignSmeConfig(BaseModel):
    """Configuration for SmeAssignmentPipeline."""

    lookup_concurrency: int = Field(default=1, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for console logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TeamsToolsConfig(BaseModel):
    """Root configuration for Teams API tools."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    assign_sme: AssignSmeConfig = Field(default_factory=AssignSmeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
