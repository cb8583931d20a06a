from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Mapping, Protocol, Sequence, TextIO


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    default: str = ""


class FormPresenter(Protocol):
    async def present(
        self,
        title: str,
        confirm_label: str,
        fields: Sequence[FormField],
    ) -> dict[str, str] | None:
        ...


def apply_overrides(
    fields: Sequence[FormField],
    overrides: Mapping[str, str | None],
) -> list[FormField]:
    result: list[FormField] = []
    for item in fields:
        given = overrides.get(item.name)
        result.append(item if given is None else replace(item, default=given))
    return result


class ConsoleFormPresenter:
    """Asks for each field on a text stream; an empty answer keeps the default.

    End of input, Ctrl-C or declining the final confirmation cancels the form.
    Reads block the event loop thread so Ctrl-C arrives here as KeyboardInterrupt;
    nothing else runs while the form is open.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        overrides: Mapping[str, str | None] | None = None,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.overrides = dict(overrides or {})

    async def present(
        self,
        title: str,
        confirm_label: str,
        fields: Sequence[FormField],
    ) -> dict[str, str] | None:
        prepared = apply_overrides(fields, self.overrides)
        return self._ask(title, confirm_label, prepared)

    def _ask(
        self,
        title: str,
        confirm_label: str,
        fields: Sequence[FormField],
    ) -> dict[str, str] | None:
        self.stdout.write(f"{title}\n")
        values: dict[str, str] = {}
        try:
            for item in fields:
                suffix = f" [{item.default}]" if item.default else ""
                self.stdout.write(f"{item.label}{suffix}: ")
                self.stdout.flush()
                line = self.stdin.readline()
                if not line:
                    return None
                values[item.name] = line.strip() or item.default

            self.stdout.write(f"{confirm_label}? [Y/n]: ")
            self.stdout.flush()
            answer = self.stdin.readline()
        except KeyboardInterrupt:
            return None

        if not answer or answer.strip().lower() in {"n", "no"}:
            return None
        return values


class PresetFormPresenter:
    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self.values = dict(values or {})

    async def present(
        self,
        title: str,
        confirm_label: str,
        fields: Sequence[FormField],
    ) -> dict[str, str] | None:
        return {item.name: item.default for item in apply_overrides(fields, self.values)}
