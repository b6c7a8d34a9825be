"""
Modules.

A module is a named content section that becomes both a field group and
a block in the block picker. Controls are added while the module is being
authored; when the host signals initialization the module is finalized:
its records are built, registered with the host, and it stops accepting
changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from acf_blocks.core.errors import ModuleFinalizedError
from acf_blocks.core.manager import ControlManager
from acf_blocks.core.records import BlockRecord, FieldGroupRecord, LocationRule
from acf_blocks.core.strings import to_kebab_case
from acf_blocks.host.base import Host

logger = logging.getLogger(__name__)

KEY_PREFIX = "group_"
BLOCK_NAMESPACE = "acf"


def module_key(title: str) -> str:
    """Derive the field group key of a module from its title."""
    return f"{KEY_PREFIX}{to_kebab_case(title)}"


def block_identifier(key: str) -> str:
    """Block identifier the host assigns to a module's block."""
    return f"{BLOCK_NAMESPACE}/{key}"


class ModuleState(str, Enum):
    """Lifecycle of a module."""

    AUTHORING = "authoring"  # Controls may be added
    FINALIZED = "finalized"  # Registered with the host, immutable


class Module(ControlManager):
    """
    A field group exposed as a block.

    Modules are created through ``Builder.add_module``; the ``add_*``
    methods inherited from ControlManager declare its controls.

    Example:
        hero = builder.add_module("Hero Banner", "layout")
        hero.add_text("heading", "Heading")
        hero.add_image("background", "Background")
    """

    def __init__(
        self,
        key: str,
        title: str,
        category: str,
        location: LocationRule,
        render_callback: Callable[..., Any],
        mode: str = "edit",
    ):
        super().__init__()
        self._key = key
        self._title = title
        self._category = category
        self._location = location
        self._render_callback = render_callback
        self._mode = mode
        self._state = ModuleState.AUTHORING
        self._block_registered = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def title(self) -> str:
        return self._title

    @property
    def category(self) -> str:
        return self._category

    @property
    def location(self) -> LocationRule:
        return self._location

    @property
    def state(self) -> ModuleState:
        return self._state

    @property
    def is_frozen(self) -> bool:
        return self._state is ModuleState.FINALIZED

    @property
    def block_id(self) -> str:
        """Block identifier this module's field group is bound to."""
        return self.location.block_id

    def block_record(self) -> BlockRecord:
        """Build the block registration record."""
        return BlockRecord(
            name=self.key,
            title=self.title,
            render_callback=self._render_callback,
            category=self._category,
            mode=self._mode,
        )

    def field_group_record(self) -> FieldGroupRecord:
        """Build the field group record from the controls added so far."""
        return FieldGroupRecord(
            key=self.key,
            title=self.title,
            location=self.location,
            fields=tuple(self.render_controls()),
        )

    def finalize(self, host: Host) -> None:
        """
        Register the module with the host and stop accepting changes.

        The block is registered first, then the field group. Errors raised
        by the host propagate unchanged and leave the module in AUTHORING.
        A block the host already accepted is not registered again when
        finalization is retried.

        Raises:
            ModuleFinalizedError: If the module was already finalized
        """
        if self.is_frozen:
            raise ModuleFinalizedError(f"Module '{self.key}' has already been finalized")

        block = self.block_record().to_host()
        field_group = self.field_group_record().to_host()

        if not self._block_registered:
            host.register_block(block)
            self._block_registered = True
        host.add_local_field_group(field_group)

        for control in self._controls:
            control.freeze()
        self._state = ModuleState.FINALIZED

        logger.info("Registered module %s (%d controls)", self.key, len(self._controls))

    def __repr__(self) -> str:
        return f"Module(key={self.key!r}, category={self.category!r}, state={self._state.value!r})"
