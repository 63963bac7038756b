import os

import pytest

from quickenv.env import get_env, require_env
from quickenv.errors import MissingVariableError


def test_get_env_returns_value_or_default():
    os.environ["QUICKENV_TEST_PORT"] = "9000"
    os.environ.pop("QUICKENV_TEST_MISSING", None)
    assert get_env("QUICKENV_TEST_PORT", "8000") == "9000"
    assert get_env("QUICKENV_TEST_MISSING", "8000") == "8000"
    assert get_env("QUICKENV_TEST_MISSING") == ""


def test_get_env_treats_empty_as_unset():
    os.environ["QUICKENV_TEST_EMPTY"] = ""
    assert get_env("QUICKENV_TEST_EMPTY", "fallback") == "fallback"


def test_require_env():
    os.environ["QUICKENV_TEST_TOKEN"] = "t0k"
    assert require_env("QUICKENV_TEST_TOKEN") == "t0k"

    os.environ.pop("QUICKENV_TEST_MISSING", None)
    with pytest.raises(MissingVariableError) as excinfo:
        require_env("QUICKENV_TEST_MISSING")
    assert excinfo.value.key == "QUICKENV_TEST_MISSING"
    assert str(excinfo.value) == "quickenv: required environment variable QUICKENV_TEST_MISSING is not set"
