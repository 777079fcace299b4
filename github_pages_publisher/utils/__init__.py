"""Utility modules for shared functionality."""

from .helpers import build_push_url, redact_credentials, render_command

__all__ = [
    "build_push_url",
    "redact_credentials",
    "render_command",
]
