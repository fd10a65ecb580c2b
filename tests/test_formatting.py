from dataclasses import replace

import pytest

from drone_slack.channels.formatting import (
    color_for,
    prepend,
    rich_summary,
    short_summary,
)
from drone_slack.errors import InvalidInputError


def test_rich_summary(repo, build) -> None:
    assert rich_summary(repo, build) == "*success* <http://x|acme/app#abcdef12> (main) by joe"


def test_short_summary(repo, build) -> None:
    assert short_summary(repo, build) == "success acme/app#abcdef12 (main) by joe"


@pytest.mark.parametrize("summary", [short_summary, rich_summary])
def test_short_commit_hash_is_rejected(repo, build, summary) -> None:
    with pytest.raises(InvalidInputError):
        summary(repo, replace(build, commit="abc123"))


@pytest.mark.parametrize(
    "status, color",
    [
        ("success", "good"),
        ("failure", "danger"),
        ("error", "danger"),
        ("killed", "danger"),
        ("pending", "warning"),
        ("", "warning"),
    ],
)
def test_color_for(status, color) -> None:
    assert color_for(status) == color


def test_prepend_adds_missing_prefix() -> None:
    assert prepend("@", "bob") == "@bob"


def test_prepend_is_idempotent() -> None:
    assert prepend("@", "@bob") == "@bob"
    assert prepend("#", prepend("#", "dev")) == "#dev"
