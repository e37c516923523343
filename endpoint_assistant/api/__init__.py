"""
Endpoints API.

One async function per remote operation. Each accepts an optional
`client=` keyword; without it the process-wide client from
`endpoint_assistant.core.client.get_client()` is used.
"""

from endpoint_assistant.api.billing import get_billing_stats
from endpoint_assistant.api.endpoints import (
    append_items,
    create_endpoint,
    delete_endpoint,
    get_endpoint,
    list_endpoints,
)
from endpoint_assistant.api.files import download_file, get_file_url
from endpoint_assistant.api.items import delete_item
from endpoint_assistant.api.scan import scan_files, scan_text

__all__ = [
    "append_items",
    "create_endpoint",
    "delete_endpoint",
    "delete_item",
    "download_file",
    "get_billing_stats",
    "get_endpoint",
    "get_file_url",
    "list_endpoints",
    "scan_files",
    "scan_text",
]
