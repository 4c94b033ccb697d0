"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import httpx
import pytest

from workflow_client.client import Workflow

BASE_URL = "https://workflow.test/api"

COMPANY_ID = UUID("2b0c6a0e-5a43-4b8e-9a37-0f3f7c1d9e01")
USER_ID = UUID("7d6e3c52-1f0a-4c1b-8d2e-3a9b5f6c7d02")
NOTIFICATION_ID = UUID("c4a1f2e3-9b8d-4e7f-a6c5-1d2e3f4a5b03")


@pytest.fixture
def mock_client() -> MagicMock:
    """A stand-in for ``httpx.AsyncClient`` that records every call."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.request = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def workflow(mock_client: MagicMock) -> Workflow:
    """A fully configured client context using the mock transport."""
    return (
        Workflow(BASE_URL + "/", http_client=mock_client)
        .set_company(COMPANY_ID)
        .set_user(USER_ID)
        .set_notification_config(NOTIFICATION_ID)
    )


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Factory for canned JSON responses."""

    def _make(
        status_code: int = 200,
        body: Any = None,
        *,
        headers: dict[str, str] | None = None,
        method: str = "POST",
        path: str = "/",
    ) -> httpx.Response:
        return httpx.Response(
            status_code=status_code,
            json=body if body is not None else {},
            headers=headers,
            request=httpx.Request(method, f"{BASE_URL}{path}"),
        )

    return _make
