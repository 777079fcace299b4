"""Base ABC for the external tools the publisher delegates to."""

from abc import ABC, abstractmethod
from pathlib import Path


class PublishToolsBase(ABC):
    """Base ABC for publish tools.

    Implementations raise StepFailedError (or a subclass) when a tool fails.
    """

    @abstractmethod
    def generate_docs(self) -> None:
        """Generate the project documentation, excluding dependency docs."""
        pass

    @abstractmethod
    def install_importer(self) -> None:
        """Ensure the branch-import helper is installed. Must be idempotent."""
        pass

    @abstractmethod
    def import_directory(self, directory: Path, branch: str, message: str | None = None) -> None:
        """Commit the contents of directory as a fresh snapshot onto branch."""
        pass

    @abstractmethod
    def push_ref(self, remote_url: str, ref: str) -> None:
        """Force-push ref to remote_url, overwriting the remote ref."""
        pass
