import logging

import pytest

from slideview.buttons import (
    Binding,
    ButtonAction,
    ButtonBindings,
    Modifier,
    config_paths,
    parse_binding,
)


def test_default_bindings():
    bindings = ButtonBindings()
    assert bindings[ButtonAction.PAN] == Binding(1, Modifier.NONE)
    assert bindings[ButtonAction.TOGGLE_MENU] == Binding(3)
    assert bindings[ButtonAction.BLUR] == Binding(1, Modifier.CONTROL)
    assert bindings[ButtonAction.ROTATE] == Binding(2, Modifier.CONTROL)
    assert bindings[ButtonAction.ZOOM_IN] == Binding(0)


def test_parse_modifiers():
    assert parse_binding("C-S-3") == Binding(3, Modifier.CONTROL | Modifier.SHIFT)
    assert parse_binding("1-4-7") == Binding(7, Modifier.MOD1 | Modifier.MOD4)


def test_parse_zero_means_movement():
    assert parse_binding("0") == Binding(0, Modifier.MOD3)


def test_parse_invalid_modifier_is_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        result = parse_binding("X-2")
    assert result == Binding(2, Modifier.NONE)
    assert "invalid modifier" in caplog.text


def test_parse_empty():
    assert parse_binding("") is None


@pytest.mark.parametrize(
    "button,state,expected",
    [
        (1, 0, ButtonAction.PAN),
        (1, Modifier.CONTROL, ButtonAction.BLUR),
        (2, Modifier.CONTROL, ButtonAction.ROTATE),
        (5, 0, ButtonAction.NEXT_IMG),
        (1, 16, ButtonAction.PAN),
        (9, 0, None),
    ],
)
def test_action_for(button, state, expected):
    assert ButtonBindings().action_for(button, state) is expected


def test_matches_requires_exact_state():
    bindings = ButtonBindings()
    assert bindings.matches(ButtonAction.PAN, 1, 0)
    assert not bindings.matches(ButtonAction.PAN, 1, Modifier.SHIFT)


def test_load_lines_with_aliases_and_comments(caplog):
    bindings = ButtonBindings()
    with caplog.at_level(logging.WARNING):
        bindings.load_lines(
            [
                "# comment\n",
                "\n",
                "zoom_in 4\n",
                "next C-5\n",
                "menu S-3\n",
                "bogus 9\n",
            ]
        )
    assert bindings[ButtonAction.ZOOM_IN] == Binding(4)
    assert bindings[ButtonAction.NEXT_IMG] == Binding(5, Modifier.CONTROL)
    assert bindings[ButtonAction.TOGGLE_MENU] == Binding(3, Modifier.SHIFT)
    assert "Invalid action: bogus" in caplog.text


def test_load_lines_without_button_keeps_state():
    bindings = ButtonBindings()
    bindings.load_lines(["blur\n"])
    assert bindings[ButtonAction.BLUR] == Binding(0, Modifier.CONTROL)


def test_config_paths():
    assert config_paths({"XDG_CONFIG_HOME": "/cfg", "HOME": "/home/u"})[0] == (
        "/cfg/slideview/buttons"
    )
    assert config_paths({"HOME": "/home/u"})[0] == "/home/u/.config/slideview/buttons"
    assert config_paths({}) == []
    assert len(config_paths({"HOME": "/home/u"})) == 2


def test_load_from_config_home(tmp_path):
    conf = tmp_path / "slideview"
    conf.mkdir()
    (conf / "buttons").write_text("prev 8\nreload C-2\n")
    bindings = ButtonBindings()
    loaded = bindings.load({"XDG_CONFIG_HOME": str(tmp_path)})
    assert loaded == str(conf / "buttons")
    assert bindings[ButtonAction.PREV_IMG] == Binding(8)
    assert bindings[ButtonAction.RELOAD_IMAGE] == Binding(2, Modifier.CONTROL)
    assert bindings.action_for(2, Modifier.CONTROL) is ButtonAction.ROTATE


def test_load_without_environment():
    bindings = ButtonBindings()
    assert bindings.load({}) is None
    assert bindings[ButtonAction.PAN] == Binding(1)