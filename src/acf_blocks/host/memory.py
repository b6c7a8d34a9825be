"""
In-process host.

Implements the host interface with a small hook dispatcher and records
everything registered with it. Used for tests, for the CLI and anywhere
the records are wanted without a running site.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from acf_blocks.host.base import FIELD_GROUP_CAPABILITY, Host

logger = logging.getLogger(__name__)

# Functions a host with the custom fields plugin active provides
ACF_CAPABILITIES = frozenset({FIELD_GROUP_CAPABILITY, "acf_register_block"})


@dataclass
class HookCallback:
    """A callback registered on a hook."""

    callback: Callable[..., Any]
    priority: int = 10
    accepted_args: int = 1

    def invoke(self, *args: Any) -> Any:
        return self.callback(*args[: self.accepted_args])


@dataclass
class EnqueuedAsset:
    """A stylesheet or script enqueued through the host."""

    handle: str
    src: str
    version: str | None = None
    in_footer: bool = False


@dataclass
class HookRegistry:
    """
    Callbacks by hook name.

    Callbacks run in ascending priority; callbacks sharing a priority run
    in registration order.
    """

    _hooks: dict[str, list[HookCallback]] = field(default_factory=dict)

    def register(self, hook: str, callback: HookCallback) -> None:
        callbacks = self._hooks.setdefault(hook, [])
        callbacks.append(callback)
        callbacks.sort(key=lambda c: c.priority)

    def callbacks(self, hook: str) -> list[HookCallback]:
        return list(self._hooks.get(hook, []))

    def has(self, hook: str) -> bool:
        return bool(self._hooks.get(hook))


class InMemoryHost(Host):
    """
    Host kept entirely in memory.

    Example:
        host = InMemoryHost()
        builder = Builder(host)
        hero = builder.add_module("Hero Banner", "layout")
        hero.add_text("heading", "Heading")
        host.do_action("acf/init")
        host.field_groups[0]["key"]  # "group_hero-banner"

    Args:
        capabilities: Functions the host claims to provide. Defaults to a
            host with the custom fields plugin active; pass an empty set to
            simulate the plugin being missing.
    """

    def __init__(self, capabilities: Iterable[str] | None = None):
        self.capabilities = set(ACF_CAPABILITIES if capabilities is None else capabilities)
        self.actions = HookRegistry()
        self.filters = HookRegistry()
        self.blocks: list[dict[str, Any]] = []
        self.field_groups: list[dict[str, Any]] = []
        self.styles: list[EnqueuedAsset] = []
        self.scripts: list[EnqueuedAsset] = []
        self.fired: list[str] = []

    def function_exists(self, name: str) -> bool:
        return name in self.capabilities

    def add_action(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        self.actions.register(hook, HookCallback(callback, priority, accepted_args))

    def add_filter(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        self.filters.register(hook, HookCallback(callback, priority, accepted_args))

    def do_action(self, hook: str, *args: Any) -> None:
        self.fired.append(hook)
        callbacks = self.actions.callbacks(hook)
        logger.debug("Firing %s (%d callbacks)", hook, len(callbacks))
        for callback in callbacks:
            callback.invoke(*args)

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        for callback in self.filters.callbacks(hook):
            value = callback.invoke(value, *args)
        return value

    def register_block(self, record: dict[str, Any]) -> None:
        self.blocks.append(record)

    def add_local_field_group(self, record: dict[str, Any]) -> None:
        self.field_groups.append(record)

    def enqueue_style(self, handle: str, src: str, version: str | None = None) -> None:
        self.styles.append(EnqueuedAsset(handle, src, version))

    def enqueue_script(
        self,
        handle: str,
        src: str,
        version: str | None = None,
        in_footer: bool = False,
    ) -> None:
        self.scripts.append(EnqueuedAsset(handle, src, version, in_footer))

    def get_field_group(self, key: str) -> dict[str, Any] | None:
        """Get a registered field group by key."""
        for group in self.field_groups:
            if group.get("key") == key:
                return group
        return None

    def get_block(self, name: str) -> dict[str, Any] | None:
        """Get a registered block by name."""
        for block in self.blocks:
            if block.get("name") == name:
                return block
        return None
