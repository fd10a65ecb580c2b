"""
Display strings for a build notification.

Both summaries share the same field order:

    status, owner/name#commit8, (branch), by author

The plain one is the attachment fallback; the rich one is Slack mrkdwn with
the status in bold and the slug linked to the build page.
"""

from drone_slack.errors import InvalidInputError
from drone_slack.models import Build, Repo

SHORT_SHA_LENGTH = 8

DEFAULT_COLOR = "warning"

# Build status -> attachment color. Unknown statuses fall back to DEFAULT_COLOR.
STATUS_COLORS: dict[str, str] = {
    "success": "good",
    "failure": "danger",
    "error": "danger",
    "killed": "danger",
}


def short_sha(commit: str) -> str:
    if len(commit) < SHORT_SHA_LENGTH:
        raise InvalidInputError(
            f"Commit hash must be at least {SHORT_SHA_LENGTH} characters, got {commit!r}"
        )
    return commit[:SHORT_SHA_LENGTH]


def short_summary(repo: Repo, build: Build) -> str:
    """Plain-text summary used as the attachment fallback."""
    return (
        f"{build.status} {repo.owner}/{repo.name}#{short_sha(build.commit)} "
        f"({build.branch}) by {build.author}"
    )


def rich_summary(repo: Repo, build: Build) -> str:
    """Slack mrkdwn summary used as the default attachment text."""
    return (
        f"*{build.status}* <{build.link}|{repo.owner}/{repo.name}#{short_sha(build.commit)}> "
        f"({build.branch}) by {build.author}"
    )


def color_for(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_COLOR)


def prepend(prefix: str, value: str) -> str:
    """Add ``prefix`` to ``value`` unless it is already there."""
    if value.startswith(prefix):
        return value
    return prefix + value
