"""Retry logic for content fetches.

Retries transient failures of the WordPress REST API with exponential
backoff and jitter. Rate-limited responses wait for the server's
``Retry-After`` hint when one is given.
"""

import time
import random
from typing import Callable, TypeVar, Optional, List

from requests.exceptions import ConnectionError, Timeout

from ..exceptions import MaxRetriesExceededError, RateLimitError, ServerError

T = TypeVar("T")


class RetryManager:
    """Manages retry logic with exponential backoff and jitter."""

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        backoff_factor: float = 2.0,
        jitter: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize retry manager.

        Args:
            max_retries: Maximum number of retry attempts
            base_delay: Base delay in seconds
            max_delay: Maximum delay in seconds
            backoff_factor: Multiplier for exponential backoff
            jitter: Whether to add random jitter to delays
            sleep: Function used to wait between attempts
        """
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter = jitter
        self._sleep = sleep

        self._retry_conditions: List[Callable[[Exception], bool]] = [
            lambda exc: isinstance(exc, (ConnectionError, Timeout)),
            lambda exc: isinstance(exc, (ServerError, RateLimitError)),
        ]

    def should_retry(self, exception: Exception) -> bool:
        return any(condition(exception) for condition in self._retry_conditions)

    def calculate_delay(self, attempt: int, exception: Optional[Exception] = None) -> float:
        """Calculate delay for a retry attempt.

        Args:
            attempt: Attempt number (0-based)
            exception: Failure that triggered the retry

        Returns:
            Delay in seconds
        """
        if isinstance(exception, RateLimitError) and exception.retry_after:
            return min(float(exception.retry_after), self.max_delay)

        delay = min(self.base_delay * (self.backoff_factor ** attempt), self.max_delay)

        if self.jitter:
            # Up to 100% extra on top of the backoff delay
            delay += delay * random.random()

        return delay

    def execute_with_retry(self, operation: Callable[[], T]) -> T:
        """Execute an operation with retry logic.

        Non-retryable exceptions propagate unchanged on the first failure.

        Raises:
            MaxRetriesExceededError: If a retryable failure persists past ``max_retries``
        """
        last_exception: Optional[Exception] = None

        for attempt in range(self.max_retries + 1):
            try:
                return operation()

            except Exception as e:
                if not self.should_retry(e):
                    raise

                last_exception = e
                if attempt == self.max_retries:
                    break

                delay = self.calculate_delay(attempt, e)
                self._sleep(delay)

        raise MaxRetriesExceededError(
            f"Maximum retries ({self.max_retries}) exceeded",
            attempts=self.max_retries + 1,
            last_exception=last_exception,
        )

