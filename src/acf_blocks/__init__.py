"""
acf-blocks - declare custom field modules once, use them as editor blocks.

Each module declared through the builder is registered both as an Advanced
Custom Fields field group and as a block in the block picker.
"""

from __future__ import annotations

from acf_blocks._version import get_version
from acf_blocks.core import (
    AcfBlocksError,
    Builder,
    BuilderOptions,
    ControlKind,
    ControlSpec,
    HostCapabilityError,
    Module,
    ModuleFinalizedError,
    Repeater,
    load_config,
)
from acf_blocks.host import Host, InMemoryHost

__version__ = get_version()

__all__ = [
    "__version__",
    "Builder",
    "BuilderOptions",
    "load_config",
    "Module",
    "ControlSpec",
    "ControlKind",
    "Repeater",
    "Host",
    "InMemoryHost",
    "AcfBlocksError",
    "HostCapabilityError",
    "ModuleFinalizedError",
]
