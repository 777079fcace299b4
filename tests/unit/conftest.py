"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

from github_pages_publisher.configuration.models import PublishConfig
from github_pages_publisher.publishing.abc import PublishToolsBase
from github_pages_publisher.publishing.exceptions import ToolInvocationError


class RecordingPublishTools(PublishToolsBase):
    """Publish tools double that records every call and can be told to fail."""

    def __init__(self, output_dir: Path, fail_on: set[str] | None = None) -> None:
        self.output_dir = output_dir
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))
        if name in self.fail_on:
            raise ToolInvocationError(name, 1)

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def generate_docs(self) -> None:
        self._record("generate_docs")
        # Mimic cargo creating its output tree
        (self.output_dir / "scinotation").mkdir(parents=True, exist_ok=True)
        (self.output_dir / "scinotation" / "index.html").write_text("<html></html>", encoding="utf-8")

    def install_importer(self) -> None:
        self._record("install_importer")

    def import_directory(self, directory: Path, branch: str, message: str | None = None) -> None:
        self._record("import_directory", directory, branch, message)

    def push_ref(self, remote_url: str, ref: str) -> None:
        self._record("push_ref", remote_url, ref)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def publishing_config(tmp_path: Path) -> PublishConfig:
    """A configuration whose build signals all pass the guard."""
    return PublishConfig(
        repo_slug="brandonson/scinotation-rs",
        is_pull_request="false",
        branch="master",
        token="secret-token",
        project_dir=tmp_path,
    )


@pytest.fixture
def recording_tools(publishing_config: PublishConfig) -> RecordingPublishTools:
    """Publish tools double writing into the configured output directory."""
    return RecordingPublishTools(publishing_config.output_dir)
