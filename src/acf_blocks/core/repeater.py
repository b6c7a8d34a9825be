"""Repeater controls: a control holding its own ordered set of sub controls."""

from __future__ import annotations

from typing import Any

from acf_blocks.core.controls import ControlSpec
from acf_blocks.core.manager import ControlManager
from acf_blocks.core.settings import ControlKind, ControlSettings


class Repeater(ControlSpec, ControlManager):
    """
    A control whose value is a list of rows, each row made of the sub
    controls added to it. Repeaters may be nested to any depth.

    Example:
        slides = module.add_repeater("slides", "Slides", button_label="Add slide")
        slides.add_image("photo", "Photo")
        slides.add_text("caption", "Caption")
    """

    def __init__(self, name: str, label: str, settings: ControlSettings | None = None):
        ControlSpec.__init__(self, name, label, ControlKind.REPEATER, settings)
        ControlManager.__init__(self)

    def freeze(self) -> None:
        super().freeze()
        for control in self._controls:
            control.freeze()

    def render(self) -> dict[str, Any]:
        """
        Export the repeater with its sub controls under ``sub_fields``.

        The sub fields are rendered afresh on every call, so rendering twice
        never duplicates rows.
        """
        record = super().render()
        record["sub_fields"] = self.render_controls()
        return record
