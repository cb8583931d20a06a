from __future__ import annotations

import sys
from pathlib import Path

try:
    from montage_commands.cli import main as cli_main
except ModuleNotFoundError:
    # Fallback for direct script execution: python montage_commands/app_entry.py
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))
    from montage_commands.cli import main as cli_main


def main() -> int:
    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
