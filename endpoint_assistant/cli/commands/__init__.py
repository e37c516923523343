"""
CLI Commands.

Organized by domain/feature area. Commands are registered flat on the main
app in endpoint_assistant.cli.app.
"""
