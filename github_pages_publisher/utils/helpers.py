"""General utility functions."""

import re
from collections.abc import Sequence

from github_pages_publisher.utils.constants import REDACTED

URL_CREDENTIALS_PATTERN = re.compile(r"(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*://)[^/@\s]+@")
"""Pattern matching the userinfo part of a URL, e.g. 'https://<token>@'."""


def redact_credentials(text: str) -> str:
    """Replace the credentials embedded in any URL in text with a placeholder."""
    return URL_CREDENTIALS_PATTERN.sub(rf"\g<scheme>{REDACTED}@", text)


def render_command(command: Sequence[str]) -> str:
    """Render a command line for logs and error messages with URL credentials redacted."""
    return redact_credentials(" ".join(command))


def build_push_url(token: str, repo_slug: str, host: str = "github.com") -> str:
    """Build a token-authenticated HTTPS remote URL like 'https://<token>@github.com/owner/repo.git'."""
    return f"https://{token}@{host}/{repo_slug}.git"
