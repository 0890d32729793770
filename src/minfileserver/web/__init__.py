"""HTTP layer serving project trees and files."""

from .app import create_app

__all__ = ["create_app"]
