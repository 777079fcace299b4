"""Shared constants used across the application."""

# Guard Constants
# ---------------

DEFAULT_EXPECTED_REPO_SLUG = "brandonson/scinotation-rs"
"""Repository slug that is allowed to publish documentation."""

DEFAULT_EXPECTED_BRANCH = "master"
"""Branch that is allowed to publish documentation."""

NOT_A_PULL_REQUEST = "false"
"""Exact value of the pull-request signal for builds that are not pull requests."""

# Publishing Constants
# --------------------

DEFAULT_PACKAGE_NAME = "scinotation"
"""Package whose documentation the redirect page points at."""

DEFAULT_DOC_DIR = "target/doc"
"""Directory the documentation generator writes to."""

DEFAULT_PAGES_BRANCH = "gh-pages"
"""Branch the documentation is published to."""

DEFAULT_REMOTE_HOST = "github.com"
"""Host of the remote repository that receives the force-push."""

IMPORTER_PACKAGE = "ghp-import"
"""Name of the branch-import helper, both on PyPI and as an executable."""

REDIRECT_PAGE_NAME = "index.html"
"""File name of the redirect page written into the doc output directory."""

REDIRECT_PAGE_TEMPLATE = "<meta http-equiv=refresh content=0;url={package_name}/index.html>"
"""Redirect page content. Use .format(package_name=...) to fill in the package."""

REDACTED = "*****"
"""Replacement text for secrets in logged commands and error messages."""

# Notices
# -------

SKIP_NOTICE = "Not pushing docs to github pages."
START_NOTICE = "Pushing rustdocs to github pages."
UPDATED_NOTICE = "Rustdoc documentation updated."
