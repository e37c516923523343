"""Command-line client for the Endpoints API."""
