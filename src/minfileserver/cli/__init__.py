"""Command-line entry point for running the server."""
