"""
Kind-specific control settings.

Each control kind has a settings model declaring the options the host
understands for that kind, together with the kind's defaults. Values are
never validated or converted: whatever the caller passes reaches the host
as given, and the host decides what it accepts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ControlKind(str, Enum):
    """Control kinds and the host field type each one registers as."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    PASSWORD = "password"
    RICHTEXT = "wysiwyg"
    EMBED = "oembed"
    IMAGE = "image"
    FILE = "file"
    GALLERY = "gallery"
    SELECT = "select"
    CHECKBOX = "checkbox"
    BOOLEAN = "true_false"
    RADIO = "radio"
    REPEATER = "repeater"


class ControlSettings(BaseModel):
    """
    Base for all settings models.

    Declared options are typed ``Any`` so pydantic stores them unchanged.
    Options nobody set are only emitted when the kind has a default for
    them; options set explicitly are emitted even when they are None.
    """

    model_config = ConfigDict(extra="allow")

    def to_properties(self) -> dict[str, Any]:
        properties = {
            name: getattr(self, name)
            for name, field in type(self).model_fields.items()
            if name in self.model_fields_set or field.default is not None
        }
        properties.update(self.model_extra or {})
        return properties


# =============================================================================
# Text inputs
# =============================================================================


class TextSettings(ControlSettings):
    placeholder: Any = None
    prepend: Any = None
    append: Any = None
    maxlength: Any = None
    readonly: Any = None  # host flags are 0 | 1
    disabled: Any = None


class TextAreaSettings(ControlSettings):
    placeholder: Any = None
    maxlength: Any = None
    rows: Any = None
    new_lines: Any = None  # "wpautop" | "br" | ""
    readonly: Any = None
    disabled: Any = None


class NumberSettings(ControlSettings):
    placeholder: Any = None
    prepend: Any = None
    append: Any = None
    min: Any = None
    max: Any = None
    step: Any = None


class EmailSettings(ControlSettings):
    placeholder: Any = None
    prepend: Any = None
    append: Any = None


class UrlSettings(ControlSettings):
    placeholder: Any = None


class PasswordSettings(ControlSettings):
    placeholder: Any = None
    prepend: Any = None
    append: Any = None


class RichTextSettings(ControlSettings):
    tabs: Any = None  # "all" | "visual" | "text"
    toolbar: Any = None  # "full" | "basic" | custom
    media_upload: Any = None


class EmbedSettings(ControlSettings):
    width: Any = None
    height: Any = None


# =============================================================================
# Media
# =============================================================================


class ImageSettings(ControlSettings):
    return_format: Any = "url"  # "array" | "url" | "id"
    preview_size: Any = None
    library: Any = None
    min_width: Any = None
    min_height: Any = None
    min_size: Any = None
    max_width: Any = None
    max_height: Any = None
    max_size: Any = None
    mime_types: Any = None


class FileSettings(ControlSettings):
    return_format: Any = "url"
    preview_size: Any = "thumbnail"
    library: Any = "all"  # "all" | "uploadedTo"
    min_size: Any = 0
    max_size: Any = 0
    mime_types: Any = ""


class GallerySettings(ControlSettings):
    min: Any = None
    max: Any = None
    preview_size: Any = None
    library: Any = None
    min_width: Any = None
    min_height: Any = None
    min_size: Any = None
    max_width: Any = None
    max_height: Any = None
    max_size: Any = None
    mime_types: Any = None


# =============================================================================
# Choices
# =============================================================================


class SelectSettings(ControlSettings):
    choices: Any = None
    allow_null: Any = None
    multiple: Any = None
    ui: Any = None
    ajax: Any = None
    placeholder: Any = None


class CheckboxSettings(ControlSettings):
    choices: Any = None
    layout: Any = None  # "vertical" | "horizontal"
    allow_custom: Any = None
    save_custom: Any = None
    toggle: Any = None
    return_format: Any = None  # "value" | "label" | "array"


class BooleanSettings(ControlSettings):
    message: Any = ""
    ui: Any = None
    ui_on_text: Any = None
    ui_off_text: Any = None


class RadioSettings(ControlSettings):
    choices: Any = None
    other_choice: Any = None
    save_other_choice: Any = None
    layout: Any = None
    return_format: Any = None


class RepeaterSettings(ControlSettings):
    min: Any = None
    max: Any = None
    layout: Any = None  # "table" | "block" | "row"
    button_label: Any = None
    collapsed: Any = None  # key of the sub control shown when collapsed


SETTINGS_BY_KIND: dict[ControlKind, type[ControlSettings]] = {
    ControlKind.TEXT: TextSettings,
    ControlKind.TEXTAREA: TextAreaSettings,
    ControlKind.NUMBER: NumberSettings,
    ControlKind.EMAIL: EmailSettings,
    ControlKind.URL: UrlSettings,
    ControlKind.PASSWORD: PasswordSettings,
    ControlKind.RICHTEXT: RichTextSettings,
    ControlKind.EMBED: EmbedSettings,
    ControlKind.IMAGE: ImageSettings,
    ControlKind.FILE: FileSettings,
    ControlKind.GALLERY: GallerySettings,
    ControlKind.SELECT: SelectSettings,
    ControlKind.CHECKBOX: CheckboxSettings,
    ControlKind.BOOLEAN: BooleanSettings,
    ControlKind.RADIO: RadioSettings,
    ControlKind.REPEATER: RepeaterSettings,
}


def build_settings(kind: ControlKind, options: dict[str, Any] | None = None) -> ControlSettings:
    """
    Merge caller options over the defaults of a control kind.

    Args:
        kind: Control kind the options belong to
        options: Caller supplied options; they win over the kind defaults

    Returns:
        Settings model for the kind, holding the option values as given
    """
    return SETTINGS_BY_KIND[kind].model_validate(dict(options or {}))
