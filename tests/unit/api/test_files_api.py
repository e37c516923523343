"""
Unit tests for file operations.

Downloads touch two hosts (the API and the presigned storage URL), so these
tests use their own respx router with absolute URLs.
"""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx

from endpoint_assistant.api import download_file, get_file_url
from endpoint_assistant.api.files import default_download_path
from endpoint_assistant.core.exceptions import APIError, DownloadError

API_URL = "http://localhost:3000"
FILE_KEY = "123/job-tracker/file.pdf"
FILE_API_URL = f"{API_URL}/api/files/{FILE_KEY}"
PRESIGNED_URL = "https://s3.amazonaws.com/bucket/123/job-tracker/file.pdf?signature=xxx"


@pytest.fixture
def router():
    with respx.mock(assert_all_called=False) as mock:
        yield mock


class TestGetFileUrl:
    @pytest.mark.asyncio
    async def test_requests_json_format(self, client, router, file_url_payload):
        route = router.get(FILE_API_URL).mock(
            return_value=httpx.Response(200, json=file_url_payload)
        )

        result = await get_file_url(FILE_KEY, client=client)

        assert route.calls.last.request.url.params["format"] == "json"
        assert "expiresIn" not in route.calls.last.request.url.params
        assert result.url == PRESIGNED_URL
        assert result.expires_in == 3600

    @pytest.mark.asyncio
    async def test_expires_in_forwarded(self, client, router, file_url_payload):
        route = router.get(FILE_API_URL).mock(
            return_value=httpx.Response(200, json=file_url_payload)
        )

        await get_file_url(FILE_KEY, expires_in=600, client=client)

        assert route.calls.last.request.url.params["expiresIn"] == "600"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403, 404])
    async def test_errors_raised(self, client, router, status):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(status, text="denied"))

        with pytest.raises(APIError, match=f"^HTTP {status}: denied$"):
            await get_file_url(FILE_KEY, client=client)


class TestDownloadFile:
    @pytest.mark.asyncio
    async def test_bytes_written_unchanged(self, client, router, file_url_payload, tmp_path):
        content = bytes(range(256)) * 64
        router.get(FILE_API_URL).mock(return_value=httpx.Response(200, json=file_url_payload))
        router.get(PRESIGNED_URL).mock(return_value=httpx.Response(200, content=content))
        output = tmp_path / "out" / "nested" / "copy.pdf"

        result = await download_file(FILE_KEY, output, client=client)

        assert result == output
        assert output.read_bytes() == content

    @pytest.mark.asyncio
    async def test_default_path_under_results(self, client, router, file_url_payload, tmp_path):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(200, json=file_url_payload))
        router.get(PRESIGNED_URL).mock(return_value=httpx.Response(200, content=b"%PDF-1.4"))

        result = await download_file(FILE_KEY, client=client)

        assert result == tmp_path / "results" / "file.pdf"
        assert result.read_bytes() == b"%PDF-1.4"

    @pytest.mark.asyncio
    async def test_presigned_request_has_no_bearer(self, client, router, file_url_payload):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(200, json=file_url_payload))
        storage = router.get(PRESIGNED_URL).mock(return_value=httpx.Response(200, content=b"x"))

        await download_file(FILE_KEY, client=client)

        assert "Authorization" not in storage.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_storage_failure_raises_download_error(
        self, client, router, file_url_payload, tmp_path
    ):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(200, json=file_url_payload))
        router.get(PRESIGNED_URL).mock(return_value=httpx.Response(403, text="Expired"))

        with pytest.raises(DownloadError, match="Failed to download file: HTTP 403"):
            await download_file(FILE_KEY, tmp_path / "file.pdf", client=client)

        assert not (tmp_path / "file.pdf").exists()

    @pytest.mark.asyncio
    async def test_url_failure_skips_download(self, client, router):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(404, text="missing"))
        storage = router.get(PRESIGNED_URL)

        with pytest.raises(APIError):
            await download_file(FILE_KEY, client=client)

        assert not storage.called

    @pytest.mark.asyncio
    async def test_presigned_request_has_no_timeout(self, client, router, file_url_payload):
        router.get(FILE_API_URL).mock(return_value=httpx.Response(200, json=file_url_payload))
        router.get(PRESIGNED_URL).mock(return_value=httpx.Response(200, content=b"x"))

        with patch.object(httpx, "AsyncClient", wraps=httpx.AsyncClient) as async_client:
            await download_file(FILE_KEY, client=client)

        assert async_client.call_count >= 1
        assert all(call.kwargs == {"timeout": None} for call in async_client.call_args_list)


class TestDefaultDownloadPath:
    def test_uses_basename_of_key(self, tmp_path):
        assert default_download_path("1/a/b/report.csv") == tmp_path / "results" / "report.csv"

    def test_is_absolute(self):
        assert Path(default_download_path("x.txt")).is_absolute()
