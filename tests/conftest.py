import dataclasses

import pytest

from drone_slack.models import Author, Build, Config, Job, Message, NotificationContext, Repo

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def repo() -> Repo:
    return Repo(owner="acme", name="app")


@pytest.fixture
def build() -> Build:
    return Build(
        event="push",
        number=42,
        commit="abcdef1234",
        ref="refs/heads/main",
        branch="main",
        author=Author(username="joe", name="Joe Bloggs", email="joe@example.com"),
        message=Message.parse("Fix login\n\nUse the new token endpoint."),
        status="success",
        link="http://x",
        created=1_700_000_000,
        started=1_700_000_090,
    )


@pytest.fixture
def make_context(repo, build):
    def _make(config: Config = None, **build_changes) -> NotificationContext:
        return NotificationContext(
            repo=repo,
            build=dataclasses.replace(build, **build_changes),
            config=config or Config(webhook=WEBHOOK_URL),
            job=Job(started=1_700_000_095),
        )

    return _make
