"""Immutable values describing one CI run and the plugin configuration."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Repo:
    owner: str = ""
    name: str = ""


@dataclass(frozen=True)
class Author:
    username: str = ""
    name: str = ""
    email: str = ""
    avatar: str = ""

    def __str__(self) -> str:
        return self.username


@dataclass(frozen=True)
class Message:
    """Commit message split into a title line and a body."""
    raw: str = ""
    title: str = ""
    body: str = ""

    @classmethod
    def parse(cls, raw: str) -> "Message":
        # split always returns at least one element, even for ""
        first, *rest = raw.split("\n")
        return cls(raw=raw, title=first.strip(), body="\n".join(rest).strip())

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Build:
    tag: str = ""
    event: str = ""
    number: int = 0
    commit: str = ""
    ref: str = ""
    branch: str = ""
    author: Author = field(default_factory=Author)
    pull: str = ""
    message: Message = field(default_factory=Message)
    deploy_to: str = ""
    status: str = ""
    link: str = ""
    started: int = 0
    created: int = 0


@dataclass(frozen=True)
class Job:
    started: int = 0


@dataclass(frozen=True)
class Config:
    """
    Plugin settings for one notification.

    Optional fields are ``None`` when unset. Destination routing checks
    ``recipient`` first, then ``channel``.
    """
    webhook: Optional[str] = None
    channel: Optional[str] = None
    recipient: Optional[str] = None
    username: Optional[str] = None
    template: Optional[str] = None
    attachment_file: Optional[str] = None
    image_url: Optional[str] = None
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    link_names: bool = False


@dataclass(frozen=True)
class NotificationContext:
    """Everything the builder and template renderer may read."""
    repo: Repo
    build: Build
    config: Config
    job: Job = field(default_factory=Job)
