"""Allow ``python -m airules``."""

from airules.cli import cli

cli()
