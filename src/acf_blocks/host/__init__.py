"""
Host adapters.

The builder reaches its host (the content management system and its
custom fields plugin) only through the ``Host`` interface.
"""

from acf_blocks.host.base import (
    ALLOWED_BLOCKS_FILTER,
    CATEGORIES_FILTER,
    ENQUEUE_ACTION,
    FIELD_GROUP_CAPABILITY,
    INIT_ACTION,
    Host,
)
from acf_blocks.host.memory import ACF_CAPABILITIES, EnqueuedAsset, HookCallback, InMemoryHost

__all__ = [
    "Host",
    "InMemoryHost",
    "HookCallback",
    "EnqueuedAsset",
    "ACF_CAPABILITIES",
    # Hook and capability names
    "FIELD_GROUP_CAPABILITY",
    "INIT_ACTION",
    "ENQUEUE_ACTION",
    "CATEGORIES_FILTER",
    "ALLOWED_BLOCKS_FILTER",
]
