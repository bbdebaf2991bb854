"""`python -m cli` runs the same application as the `pattern-demos` script."""

import sys

from cli.main import run

# Windows consoles default to cp1252; the banner is not ASCII.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

run()
