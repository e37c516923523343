"""
File Operations.

Stored files are addressed by their storage key ("<ownerId>/<category>/<file>").
A key is first resolved to a short-lived presigned URL; downloading then
fetches that URL directly, without the API's bearer header.
"""

from pathlib import Path
from urllib.parse import quote

import httpx

from endpoint_assistant.core.client import EndpointsClient, get_client
from endpoint_assistant.core.exceptions import DownloadError
from endpoint_assistant.core.logging import get_logger, log_with_source
from endpoint_assistant.schemas.files import FileUrl

logger = get_logger(__name__)

DEFAULT_RESULTS_DIR = "results"


def default_download_path(key: str) -> Path:
    """Where a file lands when no output path is given: ./results/<basename>."""
    return Path.cwd() / DEFAULT_RESULTS_DIR / Path(key).name


async def get_file_url(
    key: str,
    expires_in: int | None = None,
    *,
    client: EndpointsClient | None = None,
) -> FileUrl:
    """
    Get a presigned URL for a file.

    Args:
        key: Storage key (e.g., "123/job-tracker/file.pdf")
        expires_in: URL lifetime in seconds; the server default applies if None
    """
    client = client or get_client()

    path = f"/api/files/{quote(key, safe='/')}?format=json"
    if expires_in is not None:
        path += f"&expiresIn={expires_in}"

    response = await client.get(path)
    return FileUrl.model_validate(response)


async def download_file(
    key: str,
    output_path: Path | str | None = None,
    *,
    client: EndpointsClient | None = None,
) -> Path:
    """
    Download a file to the local filesystem.

    Args:
        key: Storage key (e.g., "123/job-tracker/file.pdf")
        output_path: Local destination; defaults to ./results/<basename of key>

    Returns:
        The path the file was written to

    Raises:
        DownloadError: If the presigned URL answers with a non-2xx status
    """
    client = client or get_client()
    file_url = await get_file_url(key, client=client)

    final_path = Path(output_path) if output_path is not None else default_download_path(key)
    final_path.parent.mkdir(parents=True, exist_ok=True)

    log_with_source(logger, "sdk", "debug", "Downloading file", key=key, output_path=str(final_path))

    async with httpx.AsyncClient(timeout=client.timeout) as download_client:
        response = await download_client.get(file_url.url)

    if not response.is_success:
        raise DownloadError(response.status_code)

    final_path.write_bytes(response.content)

    log_with_source(
        logger,
        "sdk",
        "info",
        "File downloaded",
        key=key,
        output_path=str(final_path),
        size=len(response.content),
    )
    return final_path
