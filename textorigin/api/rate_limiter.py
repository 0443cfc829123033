"""Module with rate limiter for FastAPI endpoints."""

from collections import deque
from datetime import UTC, datetime, timedelta
from threading import Lock

from fastapi import HTTPException
from loguru import logger

from textorigin.configuration import config


class RateLimiter:
    """In-memory sliding window rate limiter keyed by client identifiers."""

    def __init__(
        self,
        max_request_per_interval: int = config.api_max_requests_per_interval,
        interval: timedelta = config.api_rate_limiter_interval,
    ) -> None:
        """
        Set up parameters and an in-memory storage.

        Args:
            max_request_per_interval (int, optional): The maximum number
                of accepted requests per client within a sliding window.
                Defaults to the value from the configuration.
            interval (timedelta, optional): Length of the sliding window.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_request_per_interval` is lower than 1.
        """
        if max_request_per_interval < 1:
            raise ValueError("`max_request_per_interval` must be >= 1.")

        if interval < timedelta(seconds=1):
            logger.warning(
                f"{RateLimiter.__name__}'s `interval` of {interval} is shorter than "
                "one second, bursts of requests will hardly be limited."
            )
        self._interval = interval
        self._max_requests_per_interval = max_request_per_interval
        self._accepted: dict[str, deque[datetime]] = {}
        self._last_eviction = datetime.now(tz=UTC)
        self._lock = Lock()

    def _evict_idle_clients(self, now: datetime) -> None:
        # Once per window, forget clients without a request in the current window.
        if self._last_eviction + self._interval > now:
            return
        self._accepted = {
            identifier: accepted
            for identifier, accepted in self._accepted.items()
            if accepted[-1] + self._interval > now
        }
        self._last_eviction = now

    def __call__(self, identifier: str) -> None:
        """
        Register a request of a client and reject it if the limit is exhausted.

        Args:
            identifier (str): Identifier of the client, e.g. its IP address.

        Raises:
            HTTPException: Raised with status 429 if the client has already sent
                the maximum number of requests within the window.
        """
        now = datetime.now(tz=UTC)
        with self._lock:
            self._evict_idle_clients(now)
            accepted = self._accepted.setdefault(identifier, deque())
            while accepted and accepted[0] + self._interval <= now:
                accepted.popleft()

            if len(accepted) >= self._max_requests_per_interval:
                logger.warning(f"Rate limit exceeded by `{identifier}`.")
                raise HTTPException(
                    status_code=429,
                    detail=(
                        f"You are allowed to send {self._max_requests_per_interval} "
                        f"request(s) every {self._interval}. Please, try again later!"
                    ),
                )
            accepted.append(now)

    def count_tracked_clients(self) -> int:
        """
        Count clients whose requests are remembered.

        Returns:
            int: The number of distinct identifiers in the storage.
        """
        with self._lock:
            return len(self._accepted)
