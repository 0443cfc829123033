"""Module with dependencies injected into the API endpoints."""

from functools import cache

from fastapi import HTTPException, Request

from textorigin.analysis import Analyser
from textorigin.api.rate_limiter import RateLimiter

rate_limiter = RateLimiter()


def get_client_identifier(request: Request) -> str:
    """
    Get an IP address of the client sending the request raising an exception if missing.

    Args:
        request (Request): The request of the client.

    Raises:
        HTTPException: Raised if an IP address cannot be retrieved from the request.

    Returns:
        str: IP address of the client, the first hop of `X-Forwarded-For` if present.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client is None:
        raise HTTPException(
            status_code=401,
            detail="Unable to identify the IP address of the client.",
        )
    return request.client.host


def enforce_rate_limit(request: Request) -> None:
    """Reject the request if its client exceeds the rate limit."""
    rate_limiter(get_client_identifier(request))


@cache
def get_analyser() -> Analyser:
    """
    Get the analyser shared by all requests.

    Returns:
        Analyser: Analyser configured from the configuration.
    """
    return Analyser()
