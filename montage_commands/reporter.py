from __future__ import annotations

from loguru import logger

from .commands import BREAK, START, SessionCommand
from .errors import MontageCommandError
from .interpreter import duration_minutes, format_clock
from .models import SessionResult
from .notifier import NotificationSurface


def success_message(command: SessionCommand, result: SessionResult) -> str:
    until = format_clock(result.projected_end_time)
    if command is START:
        minutes = duration_minutes(result.duration) if result.duration is not None else 0
        return f'Started "{result.description or ""}" for {minutes} minutes, until {until}'
    if command is BREAK:
        minutes = duration_minutes(result.duration) if result.duration is not None else 0
        if result.description:
            return f'Started break "{result.description}" for {minutes} minutes, until {until}'
        return f"Started break for {minutes} minutes, until {until}"
    return f"Extended session until {until}"


class Reporter:
    def __init__(self, surface: NotificationSurface) -> None:
        self.surface = surface

    def success(self, command: SessionCommand, result: SessionResult) -> str:
        message = success_message(command, result)
        logger.info(f"{command.name}: {message}")
        self.surface.notify(command.success_title, message)
        return message

    def failure(self, command: SessionCommand, error: MontageCommandError) -> str:
        title = error.title or command.failure_title
        logger.error(f"{command.name} failed ({type(error).__name__}): {error}")
        self.surface.notify(title, str(error))
        return title
