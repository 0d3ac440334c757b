import time
from collections.abc import Callable
from typing import Any

import requests

from ksense_assessment.config import Settings
from ksense_assessment.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
    RetryBudgetExceededError,
)
from ksense_assessment.logger import Log
from ksense_assessment.retry import RetryPolicy


class AssessmentClient:
    """Thin JSON client for the assessment API.

    GET requests follow the retry policy; POST requests are sent exactly once.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 30,
        retry_policy: RetryPolicy | None = None,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._retry_policy = retry_policy or RetryPolicy()
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {"x-api-key": api_key, "Content-Type": "application/json"}
        )
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "AssessmentClient":
        policy = RetryPolicy.fixed(
            max_attempts=settings.max_attempts,
            server_error_delay=settings.server_error_delay_seconds,
            rate_limit_delay=settings.rate_limit_delay_seconds,
        )
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
            retry_policy=policy,
            **kwargs,
        )

    def __enter__(self) -> "AssessmentClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET `path` and decode the JSON body, retrying retryable statuses."""
        url = f"{self._base_url}{path}"
        attempts = self._retry_policy.max_attempts
        for attempt in range(1, attempts + 1):
            response = self._send("GET", url, params=params)
            delay = self._retry_policy.delay_for(response.status_code)
            if delay is None:
                _raise_for_status(response, url)
                return _decode_json(response, url)

            Log.warning(
                f"GET {url} returned {response.status_code} "
                f"(attempt {attempt}/{attempts})"
            )
            if attempt < attempts:
                self._sleep(delay)

        raise RetryBudgetExceededError(url, attempts)

    def post_json(self, path: str, body: dict[str, Any]) -> tuple[int, Any]:
        """POST `body` once and return the status code with the decoded body."""
        url = f"{self._base_url}{path}"
        response = self._send("POST", url, json=body)
        _raise_for_status(response, url)
        try:
            return response.status_code, response.json()
        except ValueError:
            return response.status_code, response.text

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            return self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise ApiConnectionError(f"{method} {url} failed: {exc}") from exc


def _raise_for_status(response: requests.Response, url: str) -> None:
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise ApiResponseError(url, response.status_code, response.text) from exc


def _decode_json(response: requests.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedResponseError(f"{url} returned a non-JSON body") from exc
