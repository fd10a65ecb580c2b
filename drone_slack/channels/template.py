"""
User template rendering.

Templates are Jinja2 and see the whole notification context:

    {{ build.status }} {{ repo.owner }}/{{ repo.name }} by {{ build.author.name }}
    {% if build.status is success %}:tada:{% endif %}

Referencing a field that does not exist is an error, not an empty string.
"""

import logging
import re
import time
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from jinja2 import Environment, StrictUndefined

from drone_slack.errors import RenderError
from drone_slack.models import NotificationContext

logger = logging.getLogger(__name__)

FAILED_STATUSES = {"failure", "error", "killed"}


def format_duration(seconds: int) -> str:
    """Format whole seconds as hours, minutes and seconds, e.g. ``1h2m3s``, ``1m30s``, ``0s``."""
    seconds = int(seconds)
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def _duration(start: int, end: int) -> str:
    return format_duration(int(end) - int(start))


def _since(start: int) -> str:
    return format_duration(int(time.time()) - int(start))


def _datetime(epoch: int, fmt: str = "%Y-%m-%dT%H:%M:%SZ", tz: Optional[str] = "UTC") -> str:
    zone = ZoneInfo(tz) if tz and tz != "UTC" else timezone.utc
    return datetime.fromtimestamp(int(epoch), tz=zone).strftime(fmt)


def _uppercasefirst(value: str) -> str:
    value = str(value)
    return value[:1].upper() + value[1:]


def _regex_replace(value: str, pattern: str, replacement: str) -> str:
    return re.sub(pattern, replacement, str(value))


def _is_success(status) -> bool:
    return str(status) == "success"


def _is_failure(status) -> bool:
    return str(status) in FAILED_STATUSES


def _build_environment() -> Environment:
    env = Environment(undefined=StrictUndefined, autoescape=False)
    env.filters.update({
        "uppercasefirst": _uppercasefirst,
        "uppercase": lambda v: str(v).upper(),
        "lowercase": lambda v: str(v).lower(),
        "datetime": _datetime,
        "duration": _duration,
        "since": _since,
        "regex_replace": _regex_replace,
    })
    env.tests.update({
        "success": _is_success,
        "failure": _is_failure,
    })
    return env


_environment = _build_environment()


def render(template_text: str, context: NotificationContext) -> str:
    """
    Expand ``template_text`` against ``context`` and trim the result.

    Raises:
        RenderError: on syntax errors, unknown fields or failing filters.
    """
    try:
        template = _environment.from_string(template_text)
        rendered = template.render(
            repo=context.repo,
            build=context.build,
            config=context.config,
            job=context.job,
        )
    except Exception as e:
        logger.debug("Template rendering failed: %s", e)
        raise RenderError(f"Failed to render template: {e}") from e

    return rendered.strip()
