from __future__ import annotations

import json
import math
from datetime import datetime, timedelta
from typing import Any

from pydantic import ValidationError

from .commands import SessionCommand
from .errors import EmptyResponseError, FormatError, ProtocolError
from .models import SessionResult

_TEMPORAL_FIELDS = {"duration", "projectedEndTime"}


def parse_body(command: SessionCommand, body: str) -> SessionResult:
    try:
        document = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"response was not valid JSON: {exc}") from exc

    if document is None:
        raise EmptyResponseError("body was null. Did the request succeed?")
    if not isinstance(document, dict):
        raise ProtocolError(f"expected a JSON object, got {type(document).__name__}")

    payload = _result_object(command, document)
    try:
        result = SessionResult.model_validate(payload)
    except ValidationError as exc:
        raise _classify(exc) from exc

    if command.kind is not None and result.duration is None:
        raise ProtocolError(f"data.{command.mutation_name} had no duration")
    return result


def _result_object(command: SessionCommand, document: dict[str, Any]) -> dict[str, Any]:
    data = document.get("data")
    payload = data.get(command.mutation_name) if isinstance(data, dict) else None
    if isinstance(payload, dict):
        return payload

    errors = document.get("errors")
    if not isinstance(errors, list):
        errors = []
    messages = [str(item.get("message", item)) for item in errors if isinstance(item, dict)]
    if messages:
        raise ProtocolError(f"Montage returned errors: {'; '.join(messages)}")
    raise ProtocolError(f"response had no data.{command.mutation_name}")


def _classify(exc: ValidationError) -> Exception:
    for error in exc.errors():
        field = error["loc"][0] if error["loc"] else None
        if field in _TEMPORAL_FIELDS and error["type"] != "missing":
            return FormatError(f"could not parse {field}: {error['input']!r}")
    return ProtocolError(f"unexpected session shape: {exc}")


def duration_minutes(duration: timedelta) -> int:
    # Half-up, so 90 seconds reads as 2 minutes.
    return int(math.floor(duration.total_seconds() / 60 + 0.5))


def local_moment(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone()


def format_clock(moment: datetime) -> str:
    local = local_moment(moment)
    return f"{local.hour}:{local.minute}"
