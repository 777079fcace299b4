"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_pages_publisher.utils.constants import (
    DEFAULT_DOC_DIR,
    DEFAULT_EXPECTED_REPO_SLUG,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PAGES_BRANCH,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # CI build signals
    TRAVIS_REPO_SLUG: str = ""
    TRAVIS_PULL_REQUEST: str = ""
    TRAVIS_BRANCH: str = ""

    # Push credential
    TOKEN: str | None = None

    # Publishing settings
    EXPECTED_REPO_SLUG: str = DEFAULT_EXPECTED_REPO_SLUG
    PACKAGE_NAME: str = DEFAULT_PACKAGE_NAME
    PROJECT_DIR: str = "."
    DOC_DIR: str = DEFAULT_DOC_DIR
    PAGES_BRANCH: str = DEFAULT_PAGES_BRANCH
