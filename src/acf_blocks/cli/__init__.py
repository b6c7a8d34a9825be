"""
acf-blocks CLI package.

- app.py: Typer application and commands
- utils.py: Definition loading and shared helpers
"""

from acf_blocks.cli.app import app, main
from acf_blocks.cli.utils import build_definition, load_definition, records_to_json

__all__ = [
    "app",
    "main",
    "build_definition",
    "load_definition",
    "records_to_json",
]
