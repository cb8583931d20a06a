from __future__ import annotations


class MontageCommandError(Exception):
    """Base class for every failure a session command can report."""

    def __init__(self, message: str, title: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.title = title


class ConfigurationError(MontageCommandError):
    pass


class TransportError(MontageCommandError):
    pass


class EmptyResponseError(MontageCommandError):
    pass


class ProtocolError(MontageCommandError):
    pass


class FormatError(MontageCommandError):
    pass
