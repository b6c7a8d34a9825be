"""
Host interface.

The host is the content management system together with its custom
fields plugin. The builder never talks to it other than through this
interface, so any host (a PHP bridge, a test double, an exporter) can be
plugged in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

# The function the custom fields plugin must provide for modules to work
FIELD_GROUP_CAPABILITY = "acf_add_local_field_group"

# Hook names used by the builder
INIT_ACTION = "acf/init"
ENQUEUE_ACTION = "admin_enqueue_scripts"
CATEGORIES_FILTER = "block_categories"
ALLOWED_BLOCKS_FILTER = "allowed_block_types"


class Host(ABC):
    """
    Operations the builder needs from its host.

    Hooks follow the host's convention: callbacks run in ascending
    priority, and ``accepted_args`` limits how many of the dispatched
    arguments a callback receives.
    """

    @abstractmethod
    def function_exists(self, name: str) -> bool:
        """Whether the host provides the named function."""

    @abstractmethod
    def add_action(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        """Run ``callback`` whenever ``hook`` is fired."""

    @abstractmethod
    def add_filter(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        """Pass values filtered through ``hook`` to ``callback``."""

    @abstractmethod
    def do_action(self, hook: str, *args: Any) -> None:
        """Fire an action."""

    @abstractmethod
    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Run ``value`` through every filter registered on ``hook``."""

    @abstractmethod
    def register_block(self, record: dict[str, Any]) -> None:
        """Register a block type (``acf_register_block``)."""

    @abstractmethod
    def add_local_field_group(self, record: dict[str, Any]) -> None:
        """Register a field group (``acf_add_local_field_group``)."""

    @abstractmethod
    def enqueue_style(self, handle: str, src: str, version: str | None = None) -> None:
        """Register and enqueue a stylesheet."""

    @abstractmethod
    def enqueue_script(
        self,
        handle: str,
        src: str,
        version: str | None = None,
        in_footer: bool = False,
    ) -> None:
        """Register and enqueue a script."""
