"""Minimal project file server.

This package exposes pre-registered project directories over HTTP as a
browsable tree, with raw, JSON and plain-text views of their files.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("minfileserver")
except PackageNotFoundError:
    __version__ = "unknown"
