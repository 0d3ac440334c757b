import pytest

from ksense_assessment.retry import RetryPolicy


class TestRetryPolicyDefaults:
    def test_five_attempts(self) -> None:
        assert RetryPolicy().max_attempts == 5

    def test_server_errors_wait_one_second(self) -> None:
        policy = RetryPolicy()
        assert policy.delay_for(500) == 1.0
        assert policy.delay_for(503) == 1.0

    def test_rate_limit_waits_two_seconds(self) -> None:
        assert RetryPolicy().delay_for(429) == 2.0

    @pytest.mark.parametrize("status", [200, 400, 401, 404, 502])
    def test_other_statuses_not_retryable(self, status: int) -> None:
        assert RetryPolicy().delay_for(status) is None


class TestRetryPolicyFixed:
    def test_builds_delays(self) -> None:
        policy = RetryPolicy.fixed(max_attempts=3, server_error_delay=0.5, rate_limit_delay=4)
        assert policy.max_attempts == 3
        assert dict(policy.delays) == {500: 0.5, 503: 0.5, 429: 4}

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            RetryPolicy(max_attempts=0)
