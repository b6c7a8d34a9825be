"""
Control manager shared by modules and repeaters.

Provides one ``add_*`` factory per control kind and keeps the controls
in the order they were added, which is the order the host renders them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from acf_blocks.core.controls import ControlSpec
from acf_blocks.core.errors import ModuleFinalizedError
from acf_blocks.core.settings import ControlKind, build_settings

if TYPE_CHECKING:
    from acf_blocks.core.repeater import Repeater

logger = logging.getLogger(__name__)


class ControlManager(ABC):
    """
    Typed factory and ordered collection of controls.

    Every ``add_*`` method merges the kind's defaults with the caller's
    options (the caller wins), appends the new control and returns it so
    it can be customised further. Options may be given as a mapping, as
    keyword arguments, or both.

    Example:
        module.add_text("heading", "Heading", maxlength=80)
        module.add_select("align", "Alignment", {"left": "Left", "right": "Right"})
        slides = module.add_repeater("slides", "Slides")
        slides.add_image("photo", "Photo")
    """

    def __init__(self) -> None:
        self._controls: list[ControlSpec] = []

    @property
    @abstractmethod
    def is_frozen(self) -> bool:
        """Whether the owner has been registered with the host."""

    @property
    def controls(self) -> tuple[ControlSpec, ...]:
        """Controls in insertion order."""
        return tuple(self._controls)

    def get_control(self, name: str) -> ControlSpec | None:
        """Get a direct child control by name."""
        for control in self._controls:
            if control.name == name:
                return control
        return None

    def render_controls(self) -> list[dict[str, Any]]:
        """Render every control, in insertion order."""
        return [control.render() for control in self._controls]

    # -------------------------------------------------------------------------
    # Text inputs
    # -------------------------------------------------------------------------

    def add_text(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """
        Add a single line text input.

        Options: placeholder, prepend, append, maxlength, readonly, disabled.
        """
        return self._build_control(name, label, ControlKind.TEXT, options, extra)

    def add_textarea(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """
        Add a multi line text input.

        Options: placeholder, maxlength, rows, new_lines ("wpautop", "br"
        or "" for no formatting), readonly, disabled.
        """
        return self._build_control(name, label, ControlKind.TEXTAREA, options, extra)

    def add_number(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """Add a number input. Options: placeholder, prepend, append, min, max, step."""
        return self._build_control(name, label, ControlKind.NUMBER, options, extra)

    def add_email(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        return self._build_control(name, label, ControlKind.EMAIL, options, extra)

    def add_url(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        return self._build_control(name, label, ControlKind.URL, options, extra)

    def add_password(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        return self._build_control(name, label, ControlKind.PASSWORD, options, extra)

    def add_richtext(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """
        Add a WYSIWYG editor.

        Options: tabs ("all", "visual" or "text"), toolbar ("full", "basic"
        or a custom toolbar), media_upload.
        """
        return self._build_control(name, label, ControlKind.RICHTEXT, options, extra)

    def add_embed(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """Add an oEmbed input. Options: width, height."""
        return self._build_control(name, label, ControlKind.EMBED, options, extra)

    # -------------------------------------------------------------------------
    # Media
    # -------------------------------------------------------------------------

    def add_image(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """
        Add an image picker. Returns the image URL unless ``return_format``
        says otherwise ("array" or "id").
        """
        return self._build_control(name, label, ControlKind.IMAGE, options, extra)

    def add_file(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        """
        Add a file upload.

        Defaults: return_format "url", preview_size "thumbnail", library
        "all", min_size 0, max_size 0 and mime_types "" (any type).
        """
        return self._build_control(name, label, ControlKind.FILE, options, extra)

    def add_gallery(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> ControlSpec:
        return self._build_control(name, label, ControlKind.GALLERY, options, extra)

    # -------------------------------------------------------------------------
    # Choices
    # -------------------------------------------------------------------------

    def add_select(
        self,
        name: str,
        label: str,
        choices: dict[str, Any] | list[Any],
        options: dict[str, Any] | None = None,
        **extra: Any,
    ) -> ControlSpec:
        """
        Add a select dropdown.

        Args:
            choices: Mapping of stored values to the labels the author sees
            options: allow_null, multiple, ui, ajax, placeholder
        """
        return self._build_choice_control(name, label, ControlKind.SELECT, choices, options, extra)

    # Alias
    add_dropdown = add_select

    def add_checkbox(
        self,
        name: str,
        label: str,
        choices: dict[str, Any] | list[Any],
        options: dict[str, Any] | None = None,
        **extra: Any,
    ) -> ControlSpec:
        """
        Add a list of checkboxes.

        Options: layout ("vertical" or "horizontal"), allow_custom,
        save_custom, toggle, return_format ("value", "label" or "array").
        """
        return self._build_choice_control(
            name, label, ControlKind.CHECKBOX, choices, options, extra
        )

    def add_radio(
        self,
        name: str,
        label: str,
        choices: dict[str, Any] | list[Any],
        options: dict[str, Any] | None = None,
        **extra: Any,
    ) -> ControlSpec:
        """Add radio buttons. Options: other_choice, save_other_choice, layout."""
        return self._build_choice_control(name, label, ControlKind.RADIO, choices, options, extra)

    def add_boolean(self, name: str, label: str, message: str = "", **extra: Any) -> ControlSpec:
        """Add a true/false switch with an optional message shown beside it."""
        return self._build_control(name, label, ControlKind.BOOLEAN, {"message": message}, extra)

    # -------------------------------------------------------------------------
    # Composite controls
    # -------------------------------------------------------------------------

    def add_button(
        self,
        name: str,
        label: str,
        text: str = "",
        link: str = "",
        new_tab: bool = False,
    ) -> ControlSpec:
        """
        Add the controls describing a call to action button.

        Creates ``<name>_text`` and ``<name>_link`` controls, plus a
        ``<name>_new_tab`` switch when ``new_tab`` is set. ``text`` and
        ``link`` become the default values.

        Returns:
            The button text control
        """
        text_control = self.add_text(f"{name}_text", f"{label} Text")
        if text:
            text_control.set_default(text)

        link_control = self.add_url(f"{name}_link", f"{label} Link")
        if link:
            link_control.set_default(link)

        if new_tab:
            new_tab_control = self.add_boolean(f"{name}_new_tab", f"{label} Opens In New Tab")
            new_tab_control.set_default(1)

        return text_control

    def add_repeater(
        self, name: str, label: str, options: dict[str, Any] | None = None, **extra: Any
    ) -> Repeater:
        """
        Add a repeater and return it so sub controls can be added to it.

        Options: min, max, layout ("table", "block" or "row"),
        button_label, collapsed.
        """
        from acf_blocks.core.repeater import Repeater

        self._ensure_open()
        settings = build_settings(ControlKind.REPEATER, {**(options or {}), **extra})
        repeater = Repeater(name, label, settings)
        self._append(repeater)
        return repeater

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _build_choice_control(
        self,
        name: str,
        label: str,
        kind: ControlKind,
        choices: dict[str, Any] | list[Any],
        options: dict[str, Any] | None,
        extra: dict[str, Any],
    ) -> ControlSpec:
        return self._build_control(name, label, kind, {"choices": choices, **(options or {})}, extra)

    def _build_control(
        self,
        name: str,
        label: str,
        kind: ControlKind,
        options: dict[str, Any] | None,
        extra: dict[str, Any],
    ) -> ControlSpec:
        self._ensure_open()
        settings = build_settings(kind, {**(options or {}), **extra})
        control = ControlSpec(name, label, kind, settings)
        self._append(control)
        return control

    def _append(self, control: ControlSpec) -> None:
        self._controls.append(control)
        logger.debug("Added %s control %s", control.kind.value, control.key)

    def _ensure_open(self) -> None:
        if self.is_frozen:
            raise ModuleFinalizedError(
                f"{type(self).__name__} is already registered; controls can no longer be added"
            )
