"""Allow running with ``python -m kubehoggers``."""

from kubehoggers.main import app

app(prog_name="kubehoggers")
