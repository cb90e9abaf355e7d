"""Module with rate limiter for FastAPI endpoints."""

from collections import deque
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException
from loguru import logger

from lexidetect.configuration import config


class RateLimiter:
    """In-memory sliding window rate limiter keyed by client identifiers."""

    def __init__(
        self,
        max_request_per_interval: int = config.api_max_requests_per_interval,
        interval: timedelta = config.api_rate_limiter_interval,
    ) -> None:
        """
        Set up limits and an in-memory log of requests.

        Args:
            max_request_per_interval (int, optional): The maximum number of analyses
                a client may request within the interval. Defaults to the value from
                the configuration.
            interval (timedelta, optional): Length of the sliding window.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_request_per_interval` is lower than 1.
        """
        if max_request_per_interval < 1:
            raise ValueError("`max_request_per_interval` must be >= 1.")
        if interval <= timedelta(0):
            raise ValueError("`interval` must be a positive period of time.")
        if interval < timedelta(seconds=1):
            logger.warning(
                f"{RateLimiter.__name__} with an interval below one second barely "
                "limits clients."
            )

        self._max_requests_per_interval = max_request_per_interval
        self._interval = interval
        self._requests: dict[str, deque[datetime]] = {}

    def _forget_idle_clients(self, now: datetime) -> None:
        for identifier in list(self._requests):
            requests = self._requests[identifier]
            while requests and requests[0] + self._interval <= now:
                requests.popleft()
            if not requests:
                del self._requests[identifier]

    def __call__(self, identifier: str) -> None:
        """
        Record a request of a client and reject it if the client exceeds the limit.

        Args:
            identifier (str): Identifier of a client, e.g. an IP address.

        Raises:
            HTTPException: Raised if the client has exceeded the limit.
        """
        now = datetime.now(tz=UTC)
        self._forget_idle_clients(now)
        requests = self._requests.setdefault(identifier, deque())

        if len(requests) >= self._max_requests_per_interval:
            logger.info(f"Rate limit exceeded by {identifier}")
            raise HTTPException(
                status_code=429,
                detail=(
                    f"You are allowed to request {self._max_requests_per_interval} "
                    f"analyses every {self._interval}. Please, try again later!"
                ),
            )
        requests.append(now)
