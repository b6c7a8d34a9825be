"""
Error types for acf-blocks.

Only a missing host capability is fatal. Authoring mistakes that still
produce structurally valid records (a condition pointing at a control that
does not exist, for instance) are not errors here; the host surfaces them.
"""


class AcfBlocksError(Exception):
    """Base exception for all acf-blocks errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class HostCapabilityError(AcfBlocksError):
    """
    Raised when the host lacks a function the builder cannot work without.

    Examples:
    - Advanced Custom Fields plugin not active
    - Host too old to expose local field group registration
    """

    def __init__(self, capability: str, plugin: str = "Advanced Custom Fields"):
        self.capability = capability
        self.plugin = plugin
        super().__init__(
            f"The {plugin} plugin was not detected ('{capability}' is missing). "
            "Please check to make sure it is active and try again."
        )


class ControlDefinitionError(AcfBlocksError):
    """
    Raised when a control cannot be declared.

    Examples:
    - Empty control name or label
    - Overwriting an identity property such as 'key' or 'type'
    """

    pass


class ModuleFinalizedError(AcfBlocksError):
    """
    Raised when a finalized module or one of its controls is changed.

    Examples:
    - Adding a control after the host init event fired
    - Calling a control mutator after registration
    - Finalizing the same module twice
    """

    pass


class ConfigError(AcfBlocksError):
    """Raised when acf-blocks.toml cannot be read or holds invalid values."""

    pass


class DefinitionLoadError(AcfBlocksError):
    """Raised when a module definition file cannot be imported or run."""

    pass
