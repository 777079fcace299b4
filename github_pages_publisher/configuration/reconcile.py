"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

from github_pages_publisher.configuration.env import Settings
from github_pages_publisher.configuration.exceptions import RequiredConfigurationElementError
from github_pages_publisher.configuration.models import PublishConfig


def reconcile_publish_configuration(
    settings: Settings,
    cli_repo_slug: str | None = None,
    cli_pull_request: str | None = None,
    cli_branch: str | None = None,
    cli_token: str | None = None,
    cli_expected_repo_slug: str | None = None,
    cli_package_name: str | None = None,
    cli_project_dir: Path | None = None,
    cli_doc_dir: Path | None = None,
    cli_pages_branch: str | None = None,
    cli_commit_message: str | None = None,
    cli_debug: bool = False,
) -> PublishConfig:
    """Reconciles CLI arguments with environment settings.

    Values given on the command line take precedence over the environment.
    A CLI value of None means "not given"; an empty string given on the
    command line is kept as-is so that guard comparisons stay literal.

    Args:
        settings (Settings): Settings loaded from the environment.
        cli_repo_slug (str | None): Repository slug signal.
        cli_pull_request (str | None): Pull-request signal.
        cli_branch (str | None): Branch signal.
        cli_token (str | None): Push credential.
        cli_expected_repo_slug (str | None): Repository slug allowed to publish.
        cli_package_name (str | None): Package the redirect page points at.
        cli_project_dir (Path | None): Directory the external tools run in.
        cli_doc_dir (Path | None): Documentation output directory, relative to the project directory.
        cli_pages_branch (str | None): Branch the documentation is published to.
        cli_commit_message (str | None): Commit message for the imported branch.
        cli_debug (bool): Enable debug logging.

    Returns:
        PublishConfig: The reconciled configuration.
    """
    return PublishConfig(
        repo_slug=cli_repo_slug if cli_repo_slug is not None else settings.TRAVIS_REPO_SLUG,
        is_pull_request=cli_pull_request if cli_pull_request is not None else settings.TRAVIS_PULL_REQUEST,
        branch=cli_branch if cli_branch is not None else settings.TRAVIS_BRANCH,
        token=cli_token if cli_token is not None else settings.TOKEN,
        expected_repo_slug=cli_expected_repo_slug if cli_expected_repo_slug is not None else settings.EXPECTED_REPO_SLUG,
        package_name=cli_package_name if cli_package_name is not None else settings.PACKAGE_NAME,
        project_dir=cli_project_dir if cli_project_dir is not None else Path(settings.PROJECT_DIR),
        doc_dir=cli_doc_dir if cli_doc_dir is not None else Path(settings.DOC_DIR),
        pages_branch=cli_pages_branch if cli_pages_branch is not None else settings.PAGES_BRANCH,
        commit_message=cli_commit_message,
        debug=cli_debug or settings.DEBUG,
    )


def validate_push_credentials(config: PublishConfig) -> str:
    """Validates that a push credential is configured.

    Raises:
        RequiredConfigurationElementError: If the token is missing or empty.

    Returns:
        str: The token.
    """
    if not config.token:
        raise RequiredConfigurationElementError(name="Push token", cli_name="token", env_name="TOKEN")
    return config.token
