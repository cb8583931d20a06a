from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from loguru import logger

from .commands import BREAK, COMMANDS, EXTEND_TO, START, SessionCommand
from .config import ClientConfig, CommandSettings
from .errors import MontageCommandError
from .interpreter import parse_body
from .models import UserInput
from .notifier import NotificationSurface
from .prompts import FormField, FormPresenter
from .reporter import Reporter
from .request_builder import build_envelope, build_request
from .selection import (
    Selection,
    SelectionSource,
    StaticSelection,
    is_start_applicable,
    start_defaults,
)
from .transport import HttpTransport

OutcomeStatus = Literal["ok", "cancelled", "failed"]


@dataclass(frozen=True)
class CommandOutcome:
    status: OutcomeStatus
    title: str = ""
    message: str = ""


class CommandAction:
    def __init__(
        self,
        command: SessionCommand,
        presenter: FormPresenter,
        surface: NotificationSurface,
        selection_source: SelectionSource | None = None,
        config: ClientConfig | None = None,
        settings: CommandSettings | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self.command = command
        self.presenter = presenter
        self.reporter = Reporter(surface)
        self.selection_source = selection_source or StaticSelection()
        self.config = config or ClientConfig()
        self.settings = settings or CommandSettings()
        self.transport = transport or HttpTransport()

    def validate(self, selection: Selection | None = None) -> bool:
        if self.command is START:
            current = self.selection_source.current() if selection is None else selection
            return is_start_applicable(current)
        return True

    def fields(self, selection: Selection) -> list[FormField]:
        if self.command is START:
            defaults = start_defaults(
                selection,
                fallback_minutes=self.settings.start_minutes,
                prefer_project_name=self.settings.start_description_from_project,
            )
            return [
                FormField("description", "Description", defaults.description),
                FormField("minutes", "Minutes", defaults.minutes),
            ]
        if self.command is BREAK:
            return [
                FormField("description", "Description", self.settings.break_description),
                FormField("minutes", "Minutes", self.settings.break_minutes),
            ]
        if self.command is EXTEND_TO:
            return [FormField("target", "Until (HH:MM)", "")]
        return [FormField("minutes", "Minutes", self.settings.extend_minutes)]

    async def run(self) -> CommandOutcome:
        try:
            values = await self.presenter.present(
                self.command.form_title,
                self.command.confirm_label,
                self.fields(self.selection_source.current()),
            )
            if values is None:
                logger.debug(f"{self.command.name}: form dismissed")
                return CommandOutcome("cancelled")

            user_input = UserInput(
                minutes=values.get("minutes", ""),
                description=values.get("description") if self.command.takes_description else None,
                target=values.get("target"),
            )
            envelope = build_envelope(self.command, user_input)
            request = build_request(self.config.endpoint_url, envelope)
            body = await self.transport.send(request, failure_title=self.command.failure_title)
            result = parse_body(self.command, body)
        except MontageCommandError as exc:
            title = self.reporter.failure(self.command, exc)
            return CommandOutcome("failed", title, str(exc))

        # Break results carry no description; report the one that was sent.
        if result.description is None and user_input.description:
            result = result.model_copy(update={"description": user_input.description})
        message = self.reporter.success(self.command, result)
        return CommandOutcome("ok", self.command.success_title, message)


def build_actions(
    presenter: FormPresenter,
    surface: NotificationSurface,
    selection_source: SelectionSource | None = None,
    config: ClientConfig | None = None,
    settings: CommandSettings | None = None,
    transport: HttpTransport | None = None,
) -> dict[str, CommandAction]:
    return {
        name: CommandAction(
            command,
            presenter=presenter,
            surface=surface,
            selection_source=selection_source,
            config=config,
            settings=settings,
            transport=transport,
        )
        for name, command in COMMANDS.items()
    }
