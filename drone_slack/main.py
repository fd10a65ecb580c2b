"""Command-line entry point: build one notification and post it."""

import logging
from typing import Optional

import typer
from pydantic import ValidationError

from drone_slack import __version__
from drone_slack.channels.dispatcher import send
from drone_slack.channels.slack import build_payload
from drone_slack.config import DroneSettings, PluginSettings, load_context
from drone_slack.errors import NotifyError

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help=(
        "Send a CI build notification to a Slack incoming webhook.\n\n"
        "Settings are read from PLUGIN_* and DRONE_* environment variables; "
        "options given on the command line take precedence."
    ),
)


def _configure_logging(verbose: int) -> None:
    level = (
        logging.WARNING
        if verbose == 0
        else (logging.INFO if verbose == 1 else logging.DEBUG)
    )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def notify(
    webhook: Optional[str] = typer.Option(None, "--webhook", help="Slack incoming webhook URL."),
    channel: Optional[str] = typer.Option(None, "--channel", help="Channel override, e.g. dev."),
    recipient: Optional[str] = typer.Option(
        None, "--recipient", help="Direct-message recipient; wins over --channel."
    ),
    username: Optional[str] = typer.Option(None, "--username", help="Bot display name."),
    template: Optional[str] = typer.Option(None, "--template", help="Jinja2 message template."),
    attachment_file: Optional[str] = typer.Option(
        None, "--attachment-file", help="File whose contents are appended to the message."
    ),
    image_url: Optional[str] = typer.Option(None, "--image-url", help="Attachment image URL."),
    icon_url: Optional[str] = typer.Option(None, "--icon-url", help="Bot icon URL."),
    icon_emoji: Optional[str] = typer.Option(None, "--icon-emoji", help="Bot icon emoji."),
    link_names: Optional[bool] = typer.Option(
        None, "--link-names/--no-link-names", help="Render @mentions as user links."
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v info, -vv debug."),
):
    _configure_logging(verbose)
    logger.info("drone-slack %s", __version__)

    try:
        plugin = PluginSettings().with_overrides(
            webhook=webhook,
            channel=channel,
            recipient=recipient,
            username=username,
            template=template,
            attachment_file=attachment_file,
            image_url=image_url,
            icon_url=icon_url,
            icon_emoji=icon_emoji,
            link_names=link_names,
        )
        ctx = load_context(plugin, DroneSettings())
    except ValidationError as e:
        logger.error("Invalid settings: %s", e)
        raise typer.Exit(code=1)

    try:
        payload = build_payload(ctx)
        send(ctx.config.webhook, payload)
    except NotifyError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
