"""Run the outage-wait CLI with `python -m main` from `src/`.

The installed console script (`outage-wait`) points at the same `run`.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; the Spanish messages need utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
