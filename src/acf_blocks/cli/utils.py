"""
acf-blocks CLI utilities.

Loading of module definition files and the shared version callback.
"""

from __future__ import annotations

import importlib.util
import json
import logging
import platform
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from acf_blocks._version import get_version
from acf_blocks.core.builder import Builder
from acf_blocks.core.config import BuilderOptions, find_config, load_config
from acf_blocks.core.errors import AcfBlocksError, DefinitionLoadError
from acf_blocks.host.base import INIT_ACTION
from acf_blocks.host.memory import InMemoryHost

logger = logging.getLogger(__name__)

# Name of the function a definition file must provide
DEFINE_FUNCTION = "define"


@dataclass
class BuildResult:
    """A definition run against an in-memory host."""

    host: InMemoryHost
    builder: Builder


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"acf-blocks {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_options(definition: Path, config: Path | None) -> BuilderOptions:
    """Use the given config file, or the nearest acf-blocks.toml to the definition."""
    path = config or find_config(definition.parent)
    if path is None:
        return BuilderOptions()
    logger.debug("Using config %s", path)
    return load_config(path)


def load_definition(path: Path) -> Callable[[Builder], Any]:
    """
    Import a definition file and return its ``define(builder)`` function.

    Raises:
        DefinitionLoadError: If the file is missing, fails to import or has
            no callable ``define``
    """
    if not path.is_file():
        raise DefinitionLoadError(f"Definition file not found: {path}")

    spec = importlib.util.spec_from_file_location(f"acf_blocks_definition_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise DefinitionLoadError(f"Cannot import {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise DefinitionLoadError(f"Error importing {path}: {e}") from e

    define = getattr(module, DEFINE_FUNCTION, None)
    if not callable(define):
        raise DefinitionLoadError(f"{path} does not define a '{DEFINE_FUNCTION}(builder)' function")
    return define


def build_definition(path: Path, options: BuilderOptions) -> BuildResult:
    """
    Run a definition against an in-memory host and fire its init action.

    Raises:
        DefinitionLoadError: If the definition cannot be loaded or its
            ``define`` function fails with anything but an AcfBlocksError
    """
    define = load_definition(path)
    host = InMemoryHost()
    builder = Builder(host, options)
    try:
        define(builder)
    except AcfBlocksError:
        raise
    except Exception as e:
        raise DefinitionLoadError(f"Error running {path}: {e}") from e
    host.do_action(INIT_ACTION)
    return BuildResult(host=host, builder=builder)


def _json_default(value: Any) -> Any:
    # Render callbacks are emitted as their qualified name
    if callable(value):
        return f"{value.__module__}.{value.__qualname__}"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def records_to_json(host: InMemoryHost) -> str:
    """Serialize the blocks and field groups registered with a host."""
    payload = {"blocks": host.blocks, "field_groups": host.field_groups}
    return json.dumps(payload, indent=2, default=_json_default)
