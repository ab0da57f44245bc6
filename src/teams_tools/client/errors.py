"""Error taxonomy for API calls."""


class ApiError(Exception):
    """Base class for every failure raised by the API client."""


class ApiTransportError(ApiError):
    """Connection, DNS or TLS failure before a response body was read."""


class ApiParseError(ApiError):
    """Response body was empty or not valid JSON."""


class ApiResponseError(ApiError):
    """Response parsed as JSON but lacked an expected field."""
