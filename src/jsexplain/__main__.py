"""Allow ``python -m jsexplain``."""

from jsexplain.cli.main import run

run()
