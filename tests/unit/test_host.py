"""Tests for the in-memory host."""

from acf_blocks.host.memory import ACF_CAPABILITIES, InMemoryHost


def test_default_capabilities() -> None:
    host = InMemoryHost()
    assert host.capabilities == set(ACF_CAPABILITIES)
    assert host.function_exists("acf_add_local_field_group")
    assert not host.function_exists("register_post_type")


def test_actions_run_by_priority_then_registration_order() -> None:
    host = InMemoryHost()
    calls: list[str] = []
    host.add_action("init", lambda: calls.append("late"), priority=20)
    host.add_action("init", lambda: calls.append("first"), priority=10)
    host.add_action("init", lambda: calls.append("second"), priority=10)
    host.add_action("init", lambda: calls.append("early"), priority=5)

    host.do_action("init")

    assert calls == ["early", "first", "second", "late"]
    assert host.fired == ["init"]


def test_accepted_args_truncates_arguments() -> None:
    host = InMemoryHost()
    received: list[tuple] = []
    host.add_action("save", lambda *args: received.append(args), accepted_args=2)
    host.do_action("save", 1, 2, 3)
    assert received == [(1, 2)]


def test_filters_chain_values() -> None:
    host = InMemoryHost()
    host.add_filter("title", lambda value: value + "!")
    host.add_filter("title", lambda value: value.upper(), priority=5)
    assert host.apply_filters("title", "hi") == "HI!"


def test_filter_without_callbacks_returns_value() -> None:
    assert InMemoryHost().apply_filters("anything", [1, 2]) == [1, 2]


def test_lookups() -> None:
    host = InMemoryHost()
    host.register_block({"name": "group_a"})
    host.add_local_field_group({"key": "group_a"})
    assert host.get_block("group_a") == {"name": "group_a"}
    assert host.get_field_group("group_a") == {"key": "group_a"}
    assert host.get_block("group_b") is None


def test_assets_recorded() -> None:
    host = InMemoryHost()
    host.enqueue_style("editor", "/editor.css", "1.0.0")
    host.enqueue_script("editor-js", "/editor.js", "1.0.0", in_footer=True)
    assert host.styles[0].handle == "editor"
    assert host.scripts[0].in_footer is True
