"""
Scan Operations.

Send text or files to the server's AI extraction. Results are filed into
an endpoint chosen by the server, or into `target_endpoint` when given.
All files of one call travel in a single multipart request.
"""

import mimetypes
from collections.abc import Iterable
from pathlib import Path

from endpoint_assistant.core.client import EndpointsClient, FormData, get_client
from endpoint_assistant.core.exceptions import UsageError
from endpoint_assistant.schemas.scan import ScanFile, ScanResponse


def load_scan_file(path: Path | str) -> ScanFile:
    """
    Read a local file for upload, guessing its content type from the name.

    Raises:
        UsageError: If the file cannot be read
    """
    file_path = Path(path)
    try:
        content = file_path.read_bytes()
    except OSError as e:
        raise UsageError(f"Cannot read file {file_path}: {e.strerror or e}") from e
    content_type, _ = mimetypes.guess_type(file_path.name)
    return ScanFile(filename=file_path.name, content=content, content_type=content_type)


async def scan_text(
    prompt: str,
    text: str,
    target_endpoint: str | None = None,
    *,
    client: EndpointsClient | None = None,
) -> ScanResponse:
    """
    Scan text content with AI extraction.

    Args:
        prompt: What to extract (e.g., "track job applications")
        text: The text content to scan
        target_endpoint: Endpoint path to file the results under
    """
    client = client or get_client()

    form = FormData()
    form.append("prompt", prompt)
    form.append("text", text)
    if target_endpoint:
        form.append("targetEndpoint", target_endpoint)

    response = await client.post_form_data("/api/scan", form)
    return ScanResponse.model_validate(response)


async def scan_files(
    prompt: str,
    files: Iterable[ScanFile | Path | str],
    target_endpoint: str | None = None,
    *,
    client: EndpointsClient | None = None,
) -> ScanResponse:
    """
    Scan files with AI extraction.

    Args:
        prompt: What to extract
        files: ScanFile values, or paths of local files to read
        target_endpoint: Endpoint path to file the results under

    Raises:
        UsageError: If no file is given or a path cannot be read
    """
    scan_inputs = [f if isinstance(f, ScanFile) else load_scan_file(f) for f in files]
    if not scan_inputs:
        raise UsageError("At least one file is required to scan")

    client = client or get_client()

    form = FormData()
    form.append("prompt", prompt)
    for scan_file in scan_inputs:
        form.append_file("file", scan_file.filename, scan_file.content, scan_file.content_type)
    if target_endpoint:
        form.append("targetEndpoint", target_endpoint)

    response = await client.post_form_data("/api/scan", form)
    return ScanResponse.model_validate(response)
