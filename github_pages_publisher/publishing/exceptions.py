"""Custom exceptions for the publishing module."""

from pathlib import Path


class StepFailedError(Exception):
    """Raised when a publish step fails and the remaining steps must not run."""

    pass


class ToolInvocationError(StepFailedError):
    """Raised when an external tool exits with a non-zero status or cannot be started."""

    def __init__(self, command: str, returncode: int) -> None:
        """Initializes the exception with the (redacted) command and its exit status."""
        super().__init__(f"Command '{command}' failed with exit status {returncode}")
        self.command = command
        self.returncode = returncode


class DocumentationOutputMissingError(StepFailedError):
    """Raised when the documentation generator did not produce its output directory."""

    def __init__(self, doc_dir: Path) -> None:
        """Initializes the exception with the missing directory."""
        super().__init__(f"Documentation output directory not found: {doc_dir}")
        self.doc_dir = doc_dir
