"""Base types for the Slack incoming-webhook payload."""

from dataclasses import dataclass, field
from typing import Optional

MARKDOWN_FIELDS = ("text", "fallback")


def _drop_unset(data: dict) -> dict:
    return {k: v for k, v in data.items() if v not in (None, "")}


@dataclass
class SlackAttachment:
    """A single styled attachment carrying the build status."""
    fallback: str
    color: str
    text: str = ""
    image_url: Optional[str] = None
    mrkdwn_in: list[str] = field(default_factory=lambda: list(MARKDOWN_FIELDS))

    def to_dict(self) -> dict:
        body = {
            "fallback": self.fallback,
            "color": self.color,
            "text": self.text,
            "mrkdwn_in": list(self.mrkdwn_in),
        }
        body.update(_drop_unset({"image_url": self.image_url}))
        return body


@dataclass
class SlackPayload:
    """Represents the JSON body posted to an incoming webhook."""
    attachments: list[SlackAttachment]
    username: Optional[str] = None
    channel: Optional[str] = None
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    link_names: Optional[str] = None  # "1" or unset

    def to_dict(self) -> dict:
        body = _drop_unset({
            "username": self.username,
            "channel": self.channel,
            "icon_url": self.icon_url,
            "icon_emoji": self.icon_emoji,
            "link_names": self.link_names,
        })
        body["attachments"] = [a.to_dict() for a in self.attachments]
        return body
