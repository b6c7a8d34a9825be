"""Editor stylesheets and scripts."""

from __future__ import annotations

import logging

from acf_blocks.core.config import EditorAssetsConfig
from acf_blocks.host.base import Host

logger = logging.getLogger(__name__)

ICON_FONT_HANDLE = "font-awesome-icons"
EDITOR_STYLE_HANDLE = "gutenberg-editor"
EDITOR_SCRIPT_HANDLE = "gutenberg-editor-custom"


class EditorAssets:
    """Enqueues the configured editor assets on post edit screens only."""

    def __init__(self, config: EditorAssetsConfig):
        self.config = config

    def enqueue(self, host: Host, hook: str) -> list[str]:
        """
        Enqueue the editor assets if ``hook`` is a post edit screen.

        Args:
            host: Host to enqueue through
            hook: Admin page currently being loaded

        Returns:
            Handles of the assets enqueued, in order
        """
        if hook not in self.config.editor_hooks:
            return []

        handles: list[str] = []
        version = self.config.version

        if self.config.editor_style_url:
            host.enqueue_style(EDITOR_STYLE_HANDLE, self.config.editor_style_url, version)
            handles.append(EDITOR_STYLE_HANDLE)

        if self.config.icon_font_url:
            host.enqueue_style(ICON_FONT_HANDLE, self.config.icon_font_url, version)
            handles.append(ICON_FONT_HANDLE)

        if self.config.editor_script_url:
            host.enqueue_script(
                EDITOR_SCRIPT_HANDLE, self.config.editor_script_url, version, in_footer=True
            )
            handles.append(EDITOR_SCRIPT_HANDLE)

        logger.debug("Enqueued editor assets on %s: %s", hook, ", ".join(handles) or "none")
        return handles
