from teams_tools.client.api import JSON_CONTENT_TYPE, JSON_PATCH_CONTENT_TYPE, ApiClient
from teams_tools.client.errors import (
    ApiError,
    ApiParseError,
    ApiResponseError,
    ApiTransportError,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "JSON_PATCH_CONTENT_TYPE",
    "ApiClient",
    "ApiError",
    "ApiParseError",
    "ApiResponseError",
    "ApiTransportError",
]
