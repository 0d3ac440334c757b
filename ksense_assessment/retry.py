from collections.abc import Mapping
from dataclasses import dataclass, field

SERVER_ERROR_STATUSES = (500, 503)
RATE_LIMIT_STATUS = 429


def _default_delays() -> dict[int, float]:
    return {500: 1.0, 503: 1.0, RATE_LIMIT_STATUS: 2.0}


@dataclass(frozen=True)
class RetryPolicy:
    """How many times a request may be attempted and how long to wait between tries.

    Only status codes present in `delays` are retried; every other failure is
    final on the first attempt.
    """

    max_attempts: int = 5
    delays: Mapping[int, float] = field(default_factory=_default_delays)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def delay_for(self, status_code: int) -> float | None:
        """Seconds to wait before retrying `status_code`, or None if it is not retryable."""
        return self.delays.get(status_code)

    @classmethod
    def fixed(
        cls,
        *,
        max_attempts: int,
        server_error_delay: float,
        rate_limit_delay: float,
    ) -> "RetryPolicy":
        delays = {status: server_error_delay for status in SERVER_ERROR_STATUSES}
        delays[RATE_LIMIT_STATUS] = rate_limit_delay
        return cls(max_attempts=max_attempts, delays=delays)
