import logging
from typing import Any
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# Exceptions
class GitHubRequestException(Exception):
    """A GitHub API request that did not produce a successful response.

    `status_code` is the HTTP status, or 0 when the request never got a
    response (connection refused, DNS failure, etc).
    """

    def __init__(self, url: str, status_code: int, message: str | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(
            message or f"Request to {url} failed with status {status_code}"
        )


class LoadMoreInactiveException(Exception):
    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"Load more control '{element_id}' is not active")


# Exception handlers
def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {
                "example": {"detail": "An unexpected error occurred"}
            }
        },
    }
}
