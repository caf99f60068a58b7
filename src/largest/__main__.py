"""Allow ``python -m largest``."""

from .cli import app

app(prog_name="largest")
