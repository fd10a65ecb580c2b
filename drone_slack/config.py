"""Environment-backed settings for the plugin and the CI build."""

from typing import Any, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from drone_slack.models import Author, Build, Config, Job, Message, NotificationContext, Repo


class PluginSettings(BaseSettings):
    webhook: Optional[str] = Field(
        None, validation_alias=AliasChoices("PLUGIN_WEBHOOK", "SLACK_WEBHOOK", "WEBHOOK")
    )
    channel: Optional[str] = None
    recipient: Optional[str] = None
    username: Optional[str] = None
    template: Optional[str] = None
    attachment_file: Optional[str] = Field(
        None, validation_alias=AliasChoices("PLUGIN_FILE")
    )
    image_url: Optional[str] = None
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    link_names: bool = False

    model_config = {
        "env_prefix": "PLUGIN_",
        "env_file": ".env",
        "env_ignore_empty": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def with_overrides(self, **overrides: Any) -> "PluginSettings":
        """Return a copy with every non-None override applied (CLI flags win over env)."""
        update = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=update) if update else self

    def to_config(self) -> Config:
        # Empty strings mean "unset" everywhere in the core.
        return Config(
            webhook=self.webhook or None,
            channel=self.channel or None,
            recipient=self.recipient or None,
            username=self.username or None,
            template=self.template or None,
            attachment_file=self.attachment_file or None,
            image_url=self.image_url or None,
            icon_url=self.icon_url or None,
            icon_emoji=self.icon_emoji or None,
            link_names=self.link_names,
        )


class DroneSettings(BaseSettings):
    repo_owner: str = ""
    repo_name: str = ""

    commit_sha: str = ""
    commit_ref: str = "refs/heads/master"
    commit_branch: str = "master"
    commit_author: str = ""
    commit_author_name: str = ""
    commit_author_email: str = ""
    commit_author_avatar: str = ""
    commit_message: str = ""

    pull_request: str = ""
    tag: str = ""
    deploy_to: str = ""

    build_event: str = "push"
    build_number: int = 0
    build_status: str = "success"
    build_link: str = ""
    build_started: int = 0
    build_created: int = 0

    job_started: int = 0

    model_config = {
        "env_prefix": "DRONE_",
        "env_file": ".env",
        "env_ignore_empty": True,
        "extra": "ignore",
    }

    def to_repo(self) -> Repo:
        return Repo(owner=self.repo_owner, name=self.repo_name)

    def to_build(self) -> Build:
        return Build(
            tag=self.tag,
            event=self.build_event,
            number=self.build_number,
            commit=self.commit_sha,
            ref=self.commit_ref,
            branch=self.commit_branch,
            author=Author(
                username=self.commit_author,
                name=self.commit_author_name,
                email=self.commit_author_email,
                avatar=self.commit_author_avatar,
            ),
            pull=self.pull_request,
            message=Message.parse(self.commit_message),
            deploy_to=self.deploy_to,
            status=self.build_status,
            link=self.build_link,
            started=self.build_started,
            created=self.build_created,
        )

    def to_job(self) -> Job:
        return Job(started=self.job_started)


def load_context(plugin: PluginSettings, drone: DroneSettings) -> NotificationContext:
    return NotificationContext(
        repo=drone.to_repo(),
        build=drone.to_build(),
        config=plugin.to_config(),
        job=drone.to_job(),
    )
