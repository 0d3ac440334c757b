import json
from collections.abc import Callable
from typing import Any

import pytest
import requests


def _make_response(
    status_code: int, payload: Any = None, text: str | None = None
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture()
def make_response() -> Callable[..., requests.Response]:
    """Build a real requests.Response with the given status and JSON payload."""
    return _make_response


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove run settings from the environment so defaults apply."""
    for name in (
        "API_KEY",
        "BASE_URL",
        "LOG_LEVEL",
        "REQUEST_TIMEOUT_SECONDS",
        "MAX_ATTEMPTS",
        "SERVER_ERROR_DELAY_SECONDS",
        "RATE_LIMIT_DELAY_SECONDS",
        "PAGE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
