"""
Control specifications.

A control is one input field of a module or repeater. Its identity (key,
name, label and kind) is fixed at construction; everything else lives in
an insertion-ordered property mapping that grows while the module is
being authored and is frozen once the module is registered.
"""

from __future__ import annotations

import copy
from typing import Any

from acf_blocks.core.errors import ControlDefinitionError, ModuleFinalizedError
from acf_blocks.core.records import ConditionalRule
from acf_blocks.core.settings import ControlKind, ControlSettings

KEY_PREFIX = "field_"

# Properties that identify a control and can never be set as plain properties
RESERVED_PROPERTIES = frozenset({"key", "name", "label", "type", "sub_fields"})


def control_key(name: str) -> str:
    """Derive the host key of a control from its name."""
    return f"{KEY_PREFIX}{name}"


def require_text(value: Any, what: str) -> str:
    """Reject empty or non-string control names and labels."""
    if not isinstance(value, str) or not value.strip():
        raise ControlDefinitionError(f"Control {what} must be a non-empty string, got {value!r}")
    return value


class ControlSpec:
    """
    Configuration of one control.

    Mutators change the control in place and return nothing; keep the
    reference returned by ``add_*`` to customise it further.

    Example:
        heading = module.add_text("heading", "Heading")
        heading.set_placeholder("Enter heading")
        heading.mark_required()
    """

    def __init__(
        self,
        name: str,
        label: str,
        kind: ControlKind,
        settings: ControlSettings | None = None,
    ):
        self._name = require_text(name, "name")
        self._label = require_text(label, "label")
        self._kind = ControlKind(kind)
        self._key = control_key(name)
        self._properties: dict[str, Any] = {}
        self._frozen = False

        if settings is not None:
            for prop_name, value in settings.to_properties().items():
                self.set_property(prop_name, value)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def kind(self) -> ControlKind:
        return self._kind

    @property
    def properties(self) -> dict[str, Any]:
        """Copy of the accumulated properties."""
        return dict(self._properties)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_instructions(self, instructions: str) -> None:
        """Explain to the author how the control is meant to be used."""
        self._put("instructions", instructions)

    def mark_required(self) -> None:
        """Require a value before the post can be published."""
        self._put("required", 1)

    def set_default(self, value: Any) -> None:
        """Value shown when nothing has been entered."""
        self._put("default_value", value)

    def set_condition(self, control: str, expected: Any) -> None:
        """
        Only show this control when another control has the expected value.

        The referenced control is not looked up; a condition on a control
        that does not exist is accepted and simply never matches.

        Args:
            control: Name of the control this one depends on
            expected: Value the other control must hold
        """
        rule = ConditionalRule(field=control_key(control), value=expected)
        self._put("conditional_logic", rule.to_host())

    def set_placeholder(self, text: str) -> None:
        self._put("placeholder", text)

    def set_prepend(self, text: str) -> None:
        """Text shown before the input. Only meaningful for text-like kinds."""
        self._put("prepend", text)

    def set_append(self, text: str) -> None:
        """Text shown after the input. Only meaningful for text-like kinds."""
        self._put("append", text)

    def set_property(self, name: str, value: Any) -> None:
        """
        Set any host setting not covered by a dedicated mutator.

        Raises:
            ControlDefinitionError: If ``name`` is one of the identity keys
        """
        if name in RESERVED_PROPERTIES:
            raise ControlDefinitionError(
                f"'{name}' identifies control '{self._name}' and cannot be set as a property"
            )
        self._put(name, value)

    def freeze(self) -> None:
        """Reject any further change. Called when the owning module is registered."""
        self._frozen = True

    def _put(self, name: str, value: Any) -> None:
        if self._frozen:
            raise ModuleFinalizedError(
                f"Control '{self._name}' is already registered and cannot be changed"
            )
        self._properties[name] = value

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> dict[str, Any]:
        """
        Export the control as the record the host expects.

        Returns a new mapping on every call: identity keys first, then the
        properties in the order they were first set.
        """
        record: dict[str, Any] = {
            "key": self._key,
            "name": self._name,
            "label": self._label,
            "type": self._kind.value,
        }
        record.update(copy.deepcopy(self._properties))
        return record

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, kind={self._kind.value!r})"
