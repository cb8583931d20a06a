from __future__ import annotations

import json
import re
from datetime import date, datetime, timedelta, tzinfo

import httpx

from .commands import EXTEND_TO, SessionCommand
from .errors import ConfigurationError, FormatError
from .models import MutationEnvelope, UserInput

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def duration_literal(minutes: str) -> str:
    # Forwarded verbatim; the service rejects malformed values.
    return f"PT{minutes}M"


def next_occurrence(text: str, now: datetime | None = None) -> datetime:
    match = _CLOCK_RE.match(text.strip())
    if match is None or int(match.group(1)) > 23 or int(match.group(2)) > 59:
        raise FormatError(f"could not parse target time {text!r}, expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))

    zone = now.tzinfo if now is not None else None
    ref = now if now is not None and zone is not None else (now or datetime.now()).astimezone()

    target = _wall_clock(ref.date(), hour, minute, zone)
    if target <= ref:
        target = _wall_clock(ref.date() + timedelta(days=1), hour, minute, zone)
    return target


def _wall_clock(day: date, hour: int, minute: int, zone: tzinfo | None) -> datetime:
    # Offset is resolved for the target day, not copied from now.
    naive = datetime(day.year, day.month, day.day, hour, minute)
    if zone is None:
        return naive.astimezone()
    return naive.replace(tzinfo=zone)


def build_envelope(
    command: SessionCommand,
    user_input: UserInput,
    now: datetime | None = None,
) -> MutationEnvelope:
    if command is EXTEND_TO:
        target = next_occurrence(user_input.target or "", now=now)
        return MutationEnvelope(
            query=command.document,
            variables={"target": target.isoformat()},
        )

    variables: dict[str, object] = {}
    if command.kind is not None:
        variables["description"] = user_input.description or ""
        variables["kind"] = command.kind
    variables["duration"] = duration_literal(user_input.minutes)
    return MutationEnvelope(query=command.document, variables=variables)


def build_request(endpoint: str, envelope: MutationEnvelope) -> httpx.Request:
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"could not parse the URL for the Montage API: {endpoint!r}") from exc
    if not url.host:
        raise ConfigurationError(f"could not parse the URL for the Montage API: {endpoint!r}")

    return httpx.Request(
        "POST",
        url,
        headers={"Content-Type": "application/json"},
        content=json.dumps(envelope.model_dump()).encode("utf-8"),
    )
