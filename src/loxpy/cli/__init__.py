"""
loxpy CLI package.

- main.py: typer application and commands
- repl.py: interactive prompt
- utils.py: consoles and output helpers
"""

from loxpy.cli.main import app, main
from loxpy.cli.utils import version_callback

__all__ = ["app", "main", "version_callback"]
