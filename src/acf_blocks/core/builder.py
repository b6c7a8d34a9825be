"""
Builder: the entry point for declaring modules.

The builder owns every module and block category it creates and wires
itself into the host's hooks so that, once the host signals
initialization, each module is registered as a block and a field group.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from acf_blocks.core.assets import EditorAssets
from acf_blocks.core.config import BuilderOptions
from acf_blocks.core.errors import HostCapabilityError
from acf_blocks.core.module import Module, ModuleState, block_identifier, module_key
from acf_blocks.core.records import Category, LocationRule
from acf_blocks.core.strings import to_user_friendly_case
from acf_blocks.host.base import (
    ALLOWED_BLOCKS_FILTER,
    CATEGORIES_FILTER,
    ENQUEUE_ACTION,
    FIELD_GROUP_CAPABILITY,
    INIT_ACTION,
    Host,
)

logger = logging.getLogger(__name__)


class Builder:
    """
    Registry of modules and block categories for one host.

    Construction fails straight away if the host lacks the custom fields
    plugin; nothing is registered in that case.

    Example:
        builder = Builder(host, BuilderOptions(restrict_block_categories=False))
        hero = builder.add_module("Hero Banner", "layout")
        hero.add_text("heading", "Heading")
        # later, the host fires "acf/init" and every module is registered

    Args:
        host: Host to register modules with
        options: Builder options; defaults restrict the block picker to
            the blocks created here

    Raises:
        HostCapabilityError: If the host cannot register field groups
    """

    def __init__(self, host: Host, options: BuilderOptions | None = None):
        if not host.function_exists(FIELD_GROUP_CAPABILITY):
            raise HostCapabilityError(FIELD_GROUP_CAPABILITY)

        self.host = host
        self.options = options or BuilderOptions()
        self._modules: list[Module] = []
        self._categories: list[Category] = []
        self._assets = EditorAssets(self.options.assets)

        self._register_hooks()

    def _register_hooks(self) -> None:
        self.host.add_action(ENQUEUE_ACTION, self.load_editor_assets)
        self.host.add_filter(CATEGORIES_FILTER, self.merge_block_categories, 10, 2)
        if self.options.restrict_block_categories:
            self.host.add_filter(ALLOWED_BLOCKS_FILTER, self.restrict_block_categories)
        self.host.add_action(INIT_ACTION, self.finalize)

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    @property
    def modules(self) -> tuple[Module, ...]:
        return tuple(self._modules)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    def get_module(self, key_or_title: str) -> Module | None:
        """Get a module by key or title."""
        for module in self._modules:
            if key_or_title in (module.key, module.title):
                return module
        return None

    def add_module(self, name: str, category: str) -> Module:
        """
        Create a module and return it so controls can be added to it.

        The module's category is added to the block picker if it is not
        there yet.

        Args:
            name: User friendly module name, e.g. "Hero Banner"
            category: Block picker category slug

        Returns:
            The new module, still being authored
        """
        key = module_key(name)
        if self.get_module(key) is not None:
            logger.warning("Module %s is declared more than once", key)

        location = LocationRule.for_block(block_identifier(key))
        self.add_block_category(category)

        module = Module(
            key=key,
            title=name,
            category=category,
            location=location,
            render_callback=self.render_block,
            mode=self.options.block_mode,
        )
        self._modules.append(module)
        logger.debug("Added module %s in category %s", key, category)
        return module

    def add_block_category(self, name: str) -> Category:
        """
        Add a block picker category.

        Only needed for categories no module uses yet, since adding a
        module adds its category. Categories are unique by slug; adding an
        existing slug returns the category already registered.
        """
        for category in self._categories:
            if category.slug == name:
                return category

        category = Category(slug=name, title=to_user_friendly_case(name))
        self._categories.append(category)
        logger.debug("Added block category %s", name)
        return category

    # -------------------------------------------------------------------------
    # Host callbacks
    # -------------------------------------------------------------------------

    def merge_block_categories(
        self, existing: Iterable[dict[str, Any]], context: Any = None
    ) -> list[dict[str, Any]]:
        """
        Append this builder's categories to the host's category list.

        Host categories are kept as they are; no deduplication is done
        against them.
        """
        return [*existing, *(category.to_host() for category in self._categories)]

    def restrict_block_categories(self, *args: Any) -> list[str]:
        """Allow only the blocks of this builder's modules in the block picker."""
        return [module.location.block_id for module in self._modules]

    def render_block(
        self,
        block: dict[str, Any],
        content: str = "",
        is_preview: bool = False,
        post_id: int = 0,
    ) -> None:
        """
        Render callback of every block created by this builder.

        Hands the block data to whatever the theme hooked onto the render
        action; rendering itself happens there.
        """
        self.host.do_action(self.options.render_action, block)

    def load_editor_assets(self, hook: str) -> list[str]:
        """Enqueue the editor assets when a post edit screen loads."""
        return self._assets.enqueue(self.host, hook)

    def finalize(self) -> list[Module]:
        """
        Register every module that has not been registered yet.

        Runs when the host fires its init action. Modules are registered
        in the order they were added.

        Returns:
            Modules registered by this call
        """
        pending = [m for m in self._modules if m.state is ModuleState.AUTHORING]
        for module in pending:
            module.finalize(self.host)

        logger.info(
            "Registered %d modules in %d block categories", len(pending), len(self._categories)
        )
        return pending
