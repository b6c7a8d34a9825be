"""Tests for the ControlManager factories, exercised through a module."""

import pytest

from acf_blocks.core.controls import ControlSpec
from acf_blocks.core.errors import ControlDefinitionError
from acf_blocks.core.module import Module
from acf_blocks.core.repeater import Repeater
from acf_blocks.core.settings import ControlKind


class TestFactories:
    @pytest.mark.parametrize(
        "method,kind",
        [
            ("add_text", "text"),
            ("add_textarea", "textarea"),
            ("add_number", "number"),
            ("add_email", "email"),
            ("add_url", "url"),
            ("add_password", "password"),
            ("add_richtext", "wysiwyg"),
            ("add_embed", "oembed"),
            ("add_image", "image"),
            ("add_file", "file"),
            ("add_gallery", "gallery"),
        ],
    )
    def test_simple_kinds(self, hero: Module, method: str, kind: str) -> None:
        control = getattr(hero, method)("thing", "Thing")
        assert isinstance(control, ControlSpec)
        assert control.render()["type"] == kind
        assert hero.controls == (control,)

    @pytest.mark.parametrize(
        "method,kind",
        [("add_select", "select"), ("add_checkbox", "checkbox"), ("add_radio", "radio")],
    )
    def test_choice_kinds(self, hero: Module, method: str, kind: str) -> None:
        choices = {"left": "Left", "right": "Right"}
        record = getattr(hero, method)("align", "Alignment", choices).render()
        assert record["type"] == kind
        assert record["choices"] == choices
        assert list(record)[4] == "choices"

    def test_dropdown_alias(self, hero: Module) -> None:
        record = hero.add_dropdown("size", "Size", ["s", "m", "l"], {"allow_null": 1}).render()
        assert record["type"] == "select"
        assert record["choices"] == ["s", "m", "l"]
        assert record["allow_null"] == 1

    def test_boolean_message(self, hero: Module) -> None:
        record = hero.add_boolean("show_cta", "Show CTA", "Display the button").render()
        assert record["type"] == "true_false"
        assert record["message"] == "Display the button"

    def test_text_has_no_optional_properties(self, hero: Module) -> None:
        control = hero.add_text("heading", "Heading")
        control.set_placeholder("Enter heading")
        assert control.render() == {
            "key": "field_heading",
            "name": "heading",
            "label": "Heading",
            "type": "text",
            "placeholder": "Enter heading",
        }

    def test_options_and_keywords_merge(self, hero: Module) -> None:
        record = hero.add_number("count", "Count", {"min": 1, "max": 5}, max=10, step=1).render()
        assert record["min"] == 1
        assert record["max"] == 10
        assert record["step"] == 1

    def test_image_return_format_override(self, hero: Module) -> None:
        assert hero.add_image("photo", "Photo").render()["return_format"] == "url"
        assert hero.add_image("icon", "Icon", return_format="id").render()["return_format"] == "id"

    def test_malformed_pass_through_option_is_untouched(self, hero: Module) -> None:
        record = hero.add_text("heading", "Heading", {"conditional_logic": "nonsense"}).render()
        assert record["conditional_logic"] == "nonsense"

    def test_empty_label_rejected(self, hero: Module) -> None:
        with pytest.raises(ControlDefinitionError):
            hero.add_text("heading", "")
        assert hero.controls == ()

    def test_missing_choices_reach_the_host_as_given(self, hero: Module) -> None:
        record = hero.add_radio("align", "Alignment", None).render()  # type: ignore[arg-type]
        assert record["choices"] is None


class TestOptionValues:
    """Option values reach the host exactly as the caller wrote them."""

    def test_flag_string_not_converted(self, hero: Module) -> None:
        assert hero.add_text("title", "Title", readonly="yes").render()["readonly"] == "yes"

    def test_numeric_string_not_converted(self, hero: Module) -> None:
        record = hero.add_gallery("photos", "Photos", min="2").render()
        assert record["min"] == "2"
        assert isinstance(record["min"], str)

    def test_fractional_dimension_accepted(self, hero: Module) -> None:
        record = hero.add_image("photo", "Photo", min_width=300.5).render()
        assert record["min_width"] == 300.5

    def test_none_value_kept(self, hero: Module) -> None:
        record = hero.add_text("title", "Title", default_value=None).render()
        assert "default_value" in record
        assert record["default_value"] is None

    def test_declared_and_undeclared_values_identical(self, hero: Module) -> None:
        options = {"maxlength": [80], "readonly": "yes", "wrapper": {"width": "50"}}
        record = hero.add_text("title", "Title", options).render()
        assert {name: record[name] for name in options} == options

    def test_choice_control_with_odd_options(self, hero: Module) -> None:
        record = hero.add_select("size", "Size", "s,m,l", allow_null="sometimes").render()
        assert record["choices"] == "s,m,l"
        assert record["allow_null"] == "sometimes"


class TestCollection:
    def test_insertion_order(self, hero: Module) -> None:
        hero.add_text("heading", "Heading")
        hero.add_image("background", "Background")
        hero.add_repeater("slides", "Slides")
        hero.add_boolean("dark", "Dark")
        assert [c.name for c in hero.controls] == ["heading", "background", "slides", "dark"]
        assert [r["key"] for r in hero.render_controls()] == [
            "field_heading",
            "field_background",
            "field_slides",
            "field_dark",
        ]

    def test_controls_is_a_snapshot(self, hero: Module) -> None:
        snapshot = hero.controls
        hero.add_text("heading", "Heading")
        assert snapshot == ()
        assert len(hero.controls) == 1

    def test_get_control(self, hero: Module) -> None:
        heading = hero.add_text("heading", "Heading")
        assert hero.get_control("heading") is heading
        assert hero.get_control("missing") is None

    def test_add_repeater_returns_repeater(self, hero: Module) -> None:
        slides = hero.add_repeater("slides", "Slides", button_label="Add slide")
        assert isinstance(slides, Repeater)
        assert slides.kind is ControlKind.REPEATER
        assert slides.render()["button_label"] == "Add slide"


class TestButton:
    def test_text_and_link(self, hero: Module) -> None:
        text = hero.add_button("cta", "Call To Action", text="Learn more", link="/about")
        assert text.name == "cta_text"
        records = hero.render_controls()
        assert [r["name"] for r in records] == ["cta_text", "cta_link"]
        assert records[0]["default_value"] == "Learn more"
        assert records[1]["type"] == "url"
        assert records[1]["default_value"] == "/about"

    def test_new_tab_switch(self, hero: Module) -> None:
        hero.add_button("cta", "Button", new_tab=True)
        records = hero.render_controls()
        assert [r["name"] for r in records] == ["cta_text", "cta_link", "cta_new_tab"]
        assert records[2]["type"] == "true_false"
        assert records[2]["default_value"] == 1
        assert "default_value" not in records[0]
