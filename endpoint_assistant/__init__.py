"""
Endpoint Assistant.

- core/: Configuration, logging, exceptions and the HTTP client
- schemas/: Pydantic models for API request/response payloads
- api/: One async function per remote Endpoints API operation
- cli/: Command-line client (Typer + Rich)
"""

__version__ = "0.1.0"
