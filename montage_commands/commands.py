from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SessionKind = Literal["TASK", "BREAK"]

START_DOCUMENT = (
    "mutation StartMutation($description: String!, $kind: Kind!, $duration: Duration) "
    "{ start(description: $description, kind: $kind, duration: $duration) "
    "{ description duration projectedEndTime } }"
)
BREAK_DOCUMENT = (
    "mutation StartMutation($description: String!, $kind: Kind!, $duration: Duration) "
    "{ start(description: $description, kind: $kind, duration: $duration) "
    "{ duration projectedEndTime } }"
)
EXTEND_DOCUMENT = (
    "mutation ExtendByMutation($duration: Duration!) "
    "{ extendBy(duration: $duration) { projectedEndTime } }"
)
EXTEND_TO_DOCUMENT = (
    "mutation ExtendToMutation($target: DateTime!) "
    "{ extendTo(target: $target) { description projectedEndTime } }"
)


@dataclass(frozen=True)
class SessionCommand:
    name: str
    mutation_name: str
    document: str
    kind: SessionKind | None
    form_title: str
    confirm_label: str
    success_title: str
    failure_title: str

    @property
    def takes_description(self) -> bool:
        return self.kind is not None


START = SessionCommand(
    name="start",
    mutation_name="start",
    document=START_DOCUMENT,
    kind="TASK",
    form_title="Start a session",
    confirm_label="Start",
    success_title="Started session",
    failure_title="Problem starting session in Montage",
)

BREAK = SessionCommand(
    name="break",
    mutation_name="start",
    document=BREAK_DOCUMENT,
    kind="BREAK",
    form_title="Start a break",
    confirm_label="Start",
    success_title="Started break",
    failure_title="Problem starting session in Montage",
)

EXTEND = SessionCommand(
    name="extend",
    mutation_name="extendBy",
    document=EXTEND_DOCUMENT,
    kind=None,
    form_title="Extend session",
    confirm_label="Extend",
    success_title="Extended session",
    failure_title="Problem extending session in Montage",
)

EXTEND_TO = SessionCommand(
    name="extend-to",
    mutation_name="extendTo",
    document=EXTEND_TO_DOCUMENT,
    kind=None,
    form_title="Extend session until",
    confirm_label="Extend",
    success_title="Extended session",
    failure_title="Problem extending session in Montage",
)

COMMANDS: dict[str, SessionCommand] = {
    command.name: command for command in (START, BREAK, EXTEND, EXTEND_TO)
}
