import dataclasses

import pytest

from quickenv.config import LoadOptions, resolve_options


def test_defaults():
    opts = LoadOptions()
    assert opts.pathname == ".env"
    assert opts.overwrite is False
    assert opts.debug is False
    assert opts.max_levels == 3


def test_resolve_none_gives_defaults():
    assert resolve_options(None) == LoadOptions()


def test_resolve_fills_missing_fields_without_mutating_input():
    original = LoadOptions(pathname="", overwrite=True, max_levels=0)
    resolved = resolve_options(original)
    assert resolved == LoadOptions(pathname=".env", overwrite=True, max_levels=3)
    assert resolved is not original
    assert original.pathname == ""
    assert original.max_levels == 0


@pytest.mark.parametrize("levels", [None, -5, 0])
def test_resolve_defaults_invalid_levels(levels):
    assert resolve_options(LoadOptions(max_levels=levels)).max_levels == 3


def test_resolve_keeps_explicit_values():
    opts = LoadOptions(pathname="config/local.env", debug=True, max_levels=7)
    assert resolve_options(opts) == opts


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LoadOptions().overwrite = True  # type: ignore[misc]


def test_from_dict_ignores_unknown_keys():
    opts = LoadOptions.from_dict({"pathname": "x.env", "overwrite": True, "colour": "blue"})
    assert opts == LoadOptions(pathname="x.env", overwrite=True)
    assert LoadOptions.from_dict(None) == LoadOptions()


def test_from_environ():
    env = {
        "QUICKENV_PATH": "prod.env",
        "QUICKENV_OVERWRITE": "Yes",
        "QUICKENV_DEBUG": "0",
        "QUICKENV_MAX_LEVELS": "5",
    }
    assert LoadOptions.from_environ(env) == LoadOptions(pathname="prod.env", overwrite=True, debug=False, max_levels=5)
    assert LoadOptions.from_environ({}) == LoadOptions()


def test_from_environ_invalid_levels_falls_back_to_default(log_messages):
    opts = LoadOptions.from_environ({"QUICKENV_MAX_LEVELS": "abc"})
    assert opts.max_levels == 3
    assert any("QUICKENV_MAX_LEVELS='abc'" in m for m in log_messages)
