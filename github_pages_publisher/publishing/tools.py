"""Subprocess-backed implementation of the publish tools."""

import shutil
import subprocess
import sys
from pathlib import Path

import structlog

from github_pages_publisher.publishing.abc import PublishToolsBase
from github_pages_publisher.publishing.exceptions import ToolInvocationError
from github_pages_publisher.utils.constants import IMPORTER_PACKAGE
from github_pages_publisher.utils import render_command

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def locate_importer() -> str | None:
    """Locate an installed ghp-import executable, or return None.

    Prefers the script installed next to the running interpreter, since that
    is where `python -m pip install` puts it, and falls back to PATH.
    """
    candidate = Path(sys.executable).parent / IMPORTER_PACKAGE
    if candidate.exists():
        return str(candidate)
    return shutil.which(IMPORTER_PACKAGE)


def find_importer_executable() -> str:
    """Return the ghp-import executable to run, falling back to the bare name."""
    return locate_importer() or IMPORTER_PACKAGE


class SubprocessPublishTools(PublishToolsBase):
    """Runs cargo, pip, ghp-import and git as child processes.

    Tool output is not captured; it goes to the invoking terminal unchanged.
    """

    def __init__(self, working_directory: Path) -> None:
        """Initialize with the project directory the tools run in."""
        self.working_directory = working_directory

    def run(self, command: list[str]) -> None:
        """Run a command in the working directory, raising ToolInvocationError on failure."""
        rendered = render_command(command)
        logger.info("Running command", command=rendered, cwd=str(self.working_directory))
        try:
            subprocess.run(command, cwd=self.working_directory, check=True)
        except subprocess.CalledProcessError as exc:
            logger.error("Command failed", command=rendered, returncode=exc.returncode)
            raise ToolInvocationError(rendered, exc.returncode) from None
        except FileNotFoundError:
            logger.error("Command not found", command=rendered)
            raise ToolInvocationError(rendered, 127) from None

    def generate_docs(self) -> None:
        """Run `cargo doc --no-deps`."""
        self.run(["cargo", "doc", "--no-deps"])

    def install_importer(self) -> None:
        """Run `python -m pip install ghp-import` unless ghp-import is already available."""
        existing = locate_importer()
        if existing is not None:
            logger.info("Importer already installed, skipping install", importer=existing)
            return
        self.run([sys.executable, "-m", "pip", "install", IMPORTER_PACKAGE])

    def import_directory(self, directory: Path, branch: str, message: str | None = None) -> None:
        """Run `ghp-import` to replace branch with a single commit holding directory."""
        # -n writes .nojekyll so directories starting with an underscore are served
        command = [find_importer_executable(), "-n", "--no-history", "-b", branch]
        if message:
            command.extend(["-m", message])
        command.append(str(directory))
        self.run(command)

    def push_ref(self, remote_url: str, ref: str) -> None:
        """Run `git push -qf <remote_url> <ref>`."""
        self.run(["git", "push", "-qf", remote_url, ref])
