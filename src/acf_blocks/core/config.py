"""
Builder configuration.

Options can be passed directly to the builder or read from the
``[builder]`` table of an ``acf-blocks.toml`` file:

    [builder]
    restrict_block_categories = false
    render_action = "theme_render_block"

    [builder.assets]
    editor_style_url = "https://example.com/wp-content/plugins/blocks/editor.css"
    editor_script_url = "https://example.com/wp-content/plugins/blocks/editor.js"
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from acf_blocks.core.errors import ConfigError

CONFIG_FILENAME = "acf-blocks.toml"

DEFAULT_ICON_FONT_URL = "https://use.fontawesome.com/releases/v5.8.1/css/all.css"


class EditorAssetsConfig(BaseModel):
    """Stylesheets and scripts loaded into the block editor."""

    model_config = ConfigDict(extra="forbid")

    editor_style_url: str | None = None
    editor_script_url: str | None = None
    icon_font_url: str | None = DEFAULT_ICON_FONT_URL
    version: str = "1.0.0"
    # Admin pages the editor assets are loaded on
    editor_hooks: list[str] = Field(default_factory=lambda: ["post-new.php", "post.php"])


class BuilderOptions(BaseModel):
    """
    Options for one builder instance.

    Attributes:
        restrict_block_categories: Only show blocks created through the
            builder in the block picker, hiding the host's default blocks
        render_action: Action fired with the block data whenever a block
            is rendered; the theme hooks its renderer onto it
        block_mode: Mode new blocks open in ("edit", "preview" or "auto")
        assets: Editor stylesheets and scripts
    """

    model_config = ConfigDict(extra="forbid")

    restrict_block_categories: bool = True
    render_action: str = "builder_render_callback"
    block_mode: str = "edit"
    assets: EditorAssetsConfig = Field(default_factory=EditorAssetsConfig)


def load_config(path: Path) -> BuilderOptions:
    """
    Load builder options from an acf-blocks.toml file.

    Args:
        path: Path to the TOML file

    Returns:
        BuilderOptions with parsed values, or defaults if the file does not
        exist or has no [builder] table

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid options
    """
    if not path.exists():
        return BuilderOptions()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    builder_data = data.get("builder", {})
    if not builder_data:
        return BuilderOptions()

    try:
        return BuilderOptions.model_validate(builder_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid options in {path}: {e}") from e


def find_config(start: Path) -> Path | None:
    """Look for acf-blocks.toml in ``start`` and its parents."""
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
