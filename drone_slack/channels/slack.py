"""Slack channel adapter."""

import logging
from pathlib import Path
from typing import Optional

from drone_slack.channels import SlackAttachment, SlackPayload
from drone_slack.channels.formatting import color_for, prepend, rich_summary, short_summary
from drone_slack.channels.template import render
from drone_slack.errors import AttachmentReadError
from drone_slack.models import Config, NotificationContext

logger = logging.getLogger(__name__)


def resolve_destination(config: Config) -> Optional[str]:
    """
    Pick the channel override for the webhook.

    Priority:
      1. Direct message to ``recipient`` (``@name``)
      2. ``channel`` (``#name``)
      3. None (the webhook's own default channel)
    """
    if config.recipient:
        return prepend("@", config.recipient)
    if config.channel:
        return prepend("#", config.channel)
    return None


def read_attachment_file(path: str) -> str:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise AttachmentReadError(f"Cannot read attachment file {path}: {e}") from e
    # appended verbatim; undecodable bytes become U+FFFD
    return data.decode("utf-8", errors="replace")


def build_payload(ctx: NotificationContext) -> SlackPayload:
    """
    Format a build notification for a Slack incoming webhook.

    Raises:
        InvalidInputError: commit hash shorter than eight characters
        RenderError: the configured template failed to render
        AttachmentReadError: the attachment file could not be read
    """
    config = ctx.config

    attachment = SlackAttachment(
        fallback=short_summary(ctx.repo, ctx.build),
        color=color_for(ctx.build.status),
        image_url=config.image_url,
    )

    if config.template:
        attachment.text = render(config.template, ctx)
    else:
        attachment.text = rich_summary(ctx.repo, ctx.build)

    if config.attachment_file:
        contents = read_attachment_file(config.attachment_file)
        attachment.text = f"{attachment.text}\n{contents}"

    payload = SlackPayload(
        attachments=[attachment],
        username=config.username,
        channel=resolve_destination(config),
        icon_url=config.icon_url,
        icon_emoji=config.icon_emoji,
        link_names="1" if config.link_names else None,
    )

    logger.debug("Built payload for %s/%s, destination=%s",
                 ctx.repo.owner, ctx.repo.name, payload.channel or "<webhook default>")
    return payload
