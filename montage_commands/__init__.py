"""montage_commands: start, extend or pause Montage focus sessions from the command line."""

from .actions import CommandAction, CommandOutcome, build_actions
from .cli import main

__version__ = "0.1.0"

__all__ = ["CommandAction", "CommandOutcome", "build_actions", "main", "__version__"]
