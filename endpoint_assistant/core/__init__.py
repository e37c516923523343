"""Core infrastructure: configuration, logging, exceptions, HTTP client."""
