"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs in an empty temporary working directory with all
ENDPOINTS_* variables removed, so neither a developer's .env file nor
their shell environment can leak into settings resolution. HTTP traffic
is intercepted with respx; no test reaches the network.
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio
import respx

from endpoint_assistant.core.client import EndpointsClient, reset_client
from endpoint_assistant.core.config import Settings

API_URL = "http://localhost:3000"
API_KEY = "ep_test_key_123"


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Clear ENDPOINTS_* variables, run from tmp_path and drop any cached client."""
    for name in list(os.environ):
        if name.upper().startswith("ENDPOINTS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_client()
    yield
    reset_client()


@pytest.fixture
def api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set the two required variables."""
    monkeypatch.setenv("ENDPOINTS_API_URL", API_URL)
    monkeypatch.setenv("ENDPOINTS_API_KEY", API_KEY)


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the mocked API."""
    return Settings(api_url=API_URL, api_key=API_KEY)


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncGenerator[EndpointsClient, None]:
    """An explicitly constructed client, closed after the test."""
    endpoints_client = EndpointsClient(settings)
    yield endpoints_client
    await endpoints_client.close()


@pytest.fixture
def api_mock() -> Generator[respx.MockRouter, None, None]:
    """
    Intercept all httpx traffic.

    Routes are relative to API_URL. Requests that match no route fail the
    test with an error from respx.

    Usage:
        def test_x(api_mock):
            api_mock.get("/api/billing/stats").mock(
                return_value=httpx.Response(200, json={...})
            )
    """
    with respx.mock(base_url=API_URL, assert_all_called=False) as router:
        yield router


def read_body(request: httpx.Request) -> bytes:
    """Return a captured request's body, reading streamed (multipart) bodies."""
    request.read()
    return request.content


@pytest.fixture
def request_body() -> Any:
    """Provide read_body() to tests."""
    return read_body


# =============================================================================
# Response Payloads
# =============================================================================


@pytest.fixture
def tree_payload() -> dict[str, Any]:
    return {
        "categories": [
            {
                "name": "job-tracker",
                "endpoints": [
                    {"id": 1, "path": "/job-tracker/january-2026", "slug": "january-2026"},
                    {"id": 2, "path": "/job-tracker/february-2026", "slug": "february-2026"},
                ],
            },
            {
                "name": "receipts",
                "endpoints": [
                    {"id": 3, "path": "/receipts/2026-q1", "slug": "2026-q1"},
                ],
            },
        ],
    }


@pytest.fixture
def endpoint_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "path": "/job-tracker/january-2026",
        "category": "job-tracker",
        "slug": "january-2026",
    }


@pytest.fixture
def endpoint_details_payload(endpoint_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "endpoint": endpoint_payload,
        "metadata": {
            "oldMetadata": [
                {"id": 101, "data": {"company": "Acme Corp"}, "createdAt": "2026-01-01T00:00:00Z"},
            ],
            "newMetadata": [
                {"id": 102, "data": {"company": "Beta Inc"}, "createdAt": "2026-01-15T00:00:00Z"},
            ],
        },
        "totalItems": 5,
    }


@pytest.fixture
def extracted_details_payload(endpoint_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "endpoint": endpoint_payload,
        "metadata": {
            "oldMetadata": [],
            "newMetadata": [
                {
                    "filePath": "123/job-tracker/offer.pdf",
                    "fileType": "application/pdf",
                    "fileSize": 20480,
                    "originalText": "Offer letter from Acme Corp",
                    "summary": "Job offer for Engineer at Acme Corp",
                    "entities": [
                        {"name": "Acme Corp", "type": "organization", "role": "employer"},
                        {"name": "Engineer", "type": "job_title"},
                    ],
                },
            ],
        },
        "totalItems": 1,
    }


@pytest.fixture
def file_url_payload() -> dict[str, Any]:
    return {
        "url": "https://s3.amazonaws.com/bucket/123/job-tracker/file.pdf?signature=xxx",
        "expiresIn": 3600,
    }


@pytest.fixture
def scan_payload(endpoint_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "success": True,
        "endpoint": endpoint_payload,
        "entriesAdded": 1,
        "totalEntries": 6,
    }


@pytest.fixture
def billing_payload() -> dict[str, Any]:
    return {
        "tier": "hobby",
        "parsesThisMonth": 45,
        "monthlyParseLimit": 200,
        "storageUsed": 52428800,
        "storageLimit": "524288000",
        "status": "active",
        "currentPeriodEnd": "2026-02-15T00:00:00Z",
    }


@pytest.fixture
def delete_endpoint_payload() -> dict[str, Any]:
    return {
        "success": True,
        "deletedFiles": 1,
        "fileResults": [
            {"key": "123/job-tracker/offer.pdf", "success": True},
            {"key": "123/job-tracker/cv.pdf", "success": False, "error": "AccessDenied"},
        ],
    }


@pytest.fixture
def delete_item_payload() -> dict[str, Any]:
    return {
        "success": True,
        "deleted": {"itemId": "abc12345", "hadFile": True, "fileDeleted": True},
        "endpointDeleted": False,
        "remainingItems": 4,
    }
