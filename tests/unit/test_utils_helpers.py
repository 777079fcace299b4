"""Unit tests for utility helper functions: redact_credentials, render_command and build_push_url."""

import pytest

from github_pages_publisher.utils import build_push_url, redact_credentials, render_command


@pytest.mark.parametrize(
    "text,expected",
    [
        ("https://abc123@github.com/o/r.git", "https://*****@github.com/o/r.git"),
        ("push https://doc@github.com/o/r.git and http://u:p@host/x", "push https://*****@github.com/o/r.git and http://*****@host/x"),
        ("https://github.com/o/r.git", "https://github.com/o/r.git"),
        ("user@example.com", "user@example.com"),
        ("nothing to hide", "nothing to hide"),
    ],
)
def test_redact_credentials(text: str, expected: str) -> None:
    """Test redact_credentials with and without URL credentials."""
    assert redact_credentials(text) == expected


def test_render_command_redacts_url_credentials() -> None:
    """Test that render_command joins arguments and hides the token in the remote URL."""
    command = ["git", "push", "-qf", "https://tok@github.com/o/r.git", "gh-pages"]
    assert render_command(command) == "git push -qf https://*****@github.com/o/r.git gh-pages"


@pytest.mark.parametrize("token", ["doc", "git", "cargo"])
def test_render_command_short_token_only_hides_url(token: str) -> None:
    """Test that a token which also appears as a plain word leaves the rest of the command intact."""
    command = ["git", "push", "-qf", f"https://{token}@github.com/brandonson/scinotation-rs.git", "gh-pages"]
    assert render_command(command) == "git push -qf https://*****@github.com/brandonson/scinotation-rs.git gh-pages"
    assert render_command(["cargo", "doc", "--no-deps"]) == "cargo doc --no-deps"


@pytest.mark.parametrize(
    "token,repo_slug,host,expected",
    [
        ("tok", "brandonson/scinotation-rs", "github.com", "https://tok@github.com/brandonson/scinotation-rs.git"),
        ("t0k", "owner/project", "ghe.example.com", "https://t0k@ghe.example.com/owner/project.git"),
    ],
)
def test_build_push_url(token: str, repo_slug: str, host: str, expected: str) -> None:
    """Test build_push_url with default and enterprise hosts."""
    assert build_push_url(token, repo_slug, host=host) == expected
