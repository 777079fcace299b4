"""Writes the landing page the documentation generator does not produce."""

from pathlib import Path

import structlog

from github_pages_publisher.publishing.exceptions import DocumentationOutputMissingError
from github_pages_publisher.utils.constants import REDIRECT_PAGE_NAME, REDIRECT_PAGE_TEMPLATE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def render_redirect_page(package_name: str) -> str:
    """Return the redirect page content pointing at '<package_name>/index.html'."""
    return REDIRECT_PAGE_TEMPLATE.format(package_name=package_name)


def write_redirect_page(doc_dir: Path, package_name: str) -> Path:
    """Write the redirect page into doc_dir and return its path.

    Raises:
        DocumentationOutputMissingError: If doc_dir does not exist.
    """
    if not doc_dir.is_dir():
        raise DocumentationOutputMissingError(doc_dir)
    redirect_path = doc_dir / REDIRECT_PAGE_NAME
    redirect_path.write_text(render_redirect_page(package_name), encoding="utf-8")
    logger.info("Wrote redirect page", path=str(redirect_path), package_name=package_name)
    return redirect_path
