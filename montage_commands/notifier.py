from __future__ import annotations

import platform
import shutil
import subprocess
import sys
from typing import Protocol, TextIO


class NotificationSurface(Protocol):
    def notify(self, title: str, message: str) -> None:
        ...


class StreamNotifier:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def notify(self, title: str, message: str) -> None:
        self.stream.write(f"[notify] {title}: {message}\n")
        self.stream.flush()


class DesktopNotifier(StreamNotifier):
    def notify(self, title: str, message: str) -> None:
        command = self._command_for(title, message)
        if command is not None and self._run(command):
            return
        super().notify(title, message)

    def _command_for(self, title: str, message: str) -> list[str] | None:
        system_name = platform.system().lower()
        if system_name == "darwin" and shutil.which("osascript"):
            script = (
                "display notification "
                f"\"{self._escape(message)}\" with title \"{self._escape(title)}\""
            )
            return ["osascript", "-e", script]
        if system_name == "linux" and shutil.which("notify-send"):
            return ["notify-send", title, message]
        return None

    @staticmethod
    def _run(command: list[str]) -> bool:
        # Fire and forget; the stream fallback covers a missing or failing notifier.
        try:
            result = subprocess.run(
                command,
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            return False
        return result.returncode == 0

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("\\", "\\\\").replace('"', '\\"')
