"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_pages_publisher.configuration.env import Settings
from github_pages_publisher.configuration.exceptions import RequiredConfigurationElementError
from github_pages_publisher.configuration.reconcile import reconcile_publish_configuration
from github_pages_publisher.publishing.publisher import maybe_publish
from github_pages_publisher.publishing.results import PublishOutcome
from github_pages_publisher.publishing.tools import SubprocessPublishTools
from github_pages_publisher.utils.log_config import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.command(name="publish")
def publish_cli(
    repo_slug: Annotated[str | None, Option(help="Repository slug of the build (defaults to TRAVIS_REPO_SLUG).")] = None,
    pull_request: Annotated[str | None, Option(help="Pull request signal of the build (defaults to TRAVIS_PULL_REQUEST).")] = None,
    branch: Annotated[str | None, Option(help="Branch of the build (defaults to TRAVIS_BRANCH).")] = None,
    token: Annotated[str | None, Option(help="Token used to push the pages branch (defaults to TOKEN).")] = None,
    expected_repo_slug: Annotated[str | None, Option(help="Repository slug allowed to publish (defaults to EXPECTED_REPO_SLUG).")] = None,
    package_name: Annotated[str | None, Option(help="Package the landing page redirects to (defaults to PACKAGE_NAME).")] = None,
    project_dir: Annotated[Path | None, Option(help="Project directory the tools run in (defaults to PROJECT_DIR).")] = None,
    doc_dir: Annotated[Path | None, Option(help="Documentation output directory (defaults to DOC_DIR).")] = None,
    pages_branch: Annotated[str | None, Option(help="Branch the documentation is published to (defaults to PAGES_BRANCH).")] = None,
    commit_message: Annotated[str | None, Option(help="Commit message for the pages branch.")] = None,
    debug: Annotated[bool, Option(help="Enable debug logging (defaults to DEBUG).")] = False,
) -> None:
    """Build the documentation and push it to the pages branch when the build is allowed to publish."""
    config = reconcile_publish_configuration(
        Settings(),
        cli_repo_slug=repo_slug,
        cli_pull_request=pull_request,
        cli_branch=branch,
        cli_token=token,
        cli_expected_repo_slug=expected_repo_slug,
        cli_package_name=package_name,
        cli_project_dir=project_dir,
        cli_doc_dir=doc_dir,
        cli_pages_branch=pages_branch,
        cli_commit_message=commit_message,
        cli_debug=debug,
    )
    configure_logging(config.debug)

    tools = SubprocessPublishTools(working_directory=config.project_dir)
    try:
        result = maybe_publish(config, tools)
    except RequiredConfigurationElementError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    if result.outcome == PublishOutcome.FAILED:
        failed_step = result.failed_step
        if failed_step is not None:
            typer.echo(f"Publish step '{failed_step.name}' failed: {failed_step.error}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Console script entry point."""
    typer_app()


if __name__ == "__main__":
    main()
