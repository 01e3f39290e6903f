"""Allow ``python -m es_retention``."""

from es_retention.ui.cli import app

app(prog_name="es-retention")
