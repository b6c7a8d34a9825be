"""
Core builder types.

Exports the builder, modules, controls, records and the errors they raise.
"""

from acf_blocks.core.assets import EditorAssets
from acf_blocks.core.builder import Builder
from acf_blocks.core.config import BuilderOptions, EditorAssetsConfig, find_config, load_config
from acf_blocks.core.controls import ControlSpec
from acf_blocks.core.errors import (
    AcfBlocksError,
    ConfigError,
    ControlDefinitionError,
    DefinitionLoadError,
    HostCapabilityError,
    ModuleFinalizedError,
)
from acf_blocks.core.manager import ControlManager
from acf_blocks.core.module import Module, ModuleState
from acf_blocks.core.records import (
    BlockRecord,
    Category,
    ConditionalRule,
    FieldGroupRecord,
    LocationClause,
    LocationRule,
)
from acf_blocks.core.repeater import Repeater
from acf_blocks.core.settings import ControlKind, ControlSettings
from acf_blocks.core.strings import to_kebab_case, to_user_friendly_case

__all__ = [
    # Builder
    "Builder",
    "BuilderOptions",
    "EditorAssetsConfig",
    "EditorAssets",
    "load_config",
    "find_config",
    # Modules and controls
    "Module",
    "ModuleState",
    "ControlManager",
    "ControlSpec",
    "ControlKind",
    "ControlSettings",
    "Repeater",
    # Records
    "BlockRecord",
    "FieldGroupRecord",
    "Category",
    "ConditionalRule",
    "LocationClause",
    "LocationRule",
    # Errors
    "AcfBlocksError",
    "HostCapabilityError",
    "ControlDefinitionError",
    "ModuleFinalizedError",
    "ConfigError",
    "DefinitionLoadError",
    # Strings
    "to_kebab_case",
    "to_user_friendly_case",
]
