"""Configuration threaded into the publisher."""

from dataclasses import dataclass
from pathlib import Path

from github_pages_publisher.utils.constants import (
    DEFAULT_DOC_DIR,
    DEFAULT_EXPECTED_BRANCH,
    DEFAULT_EXPECTED_REPO_SLUG,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PAGES_BRANCH,
    DEFAULT_REMOTE_HOST,
)


@dataclass
class PublishConfig:
    """Configuration for a single publish run.

    Relative doc_dir values are resolved against project_dir, which is also
    the directory the external tools run in.

    The pull-request signal is kept as the raw string the CI system provided;
    it is compared literally and never parsed into a boolean.
    """

    repo_slug: str
    is_pull_request: str
    branch: str
    token: str | None
    expected_repo_slug: str = DEFAULT_EXPECTED_REPO_SLUG
    expected_branch: str = DEFAULT_EXPECTED_BRANCH
    package_name: str = DEFAULT_PACKAGE_NAME
    project_dir: Path = Path(".")
    doc_dir: Path = Path(DEFAULT_DOC_DIR)
    pages_branch: str = DEFAULT_PAGES_BRANCH
    remote_host: str = DEFAULT_REMOTE_HOST
    commit_message: str | None = None
    debug: bool = False

    @property
    def output_dir(self) -> Path:
        """Documentation output directory resolved against the project directory."""
        return self.project_dir / self.doc_dir
