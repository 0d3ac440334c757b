class AssessmentError(Exception):
    """Base exception for all assessment run errors."""


class AssessmentApiError(AssessmentError):
    """Raised when a call to the assessment API fails."""


class ApiConnectionError(AssessmentApiError):
    """Raised when the request never produced an HTTP response."""


class ApiResponseError(AssessmentApiError):
    """Raised for an HTTP error status that is not retried."""

    def __init__(self, url: str, status_code: int, body: str) -> None:
        super().__init__(f"{url} returned HTTP {status_code}: {body}")
        self.url = url
        self.status_code = status_code
        self.body = body


class MalformedResponseError(AssessmentApiError):
    """Raised when a response body is not the JSON shape the API promises."""


class RetryBudgetExceededError(AssessmentApiError):
    """Raised when every allowed attempt for a URL hit a retryable status."""

    def __init__(self, url: str, attempts: int) -> None:
        super().__init__(f"Failed after {attempts} attempts: {url}")
        self.url = url
        self.attempts = attempts
