import logging
import sys

import pytest

from pbst import config as pbst_config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "PBST_LOG_LEVEL",
        "PBST_RECURSION_LIMIT",
        "PBST_DEFAULT_MODE",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_cache():
    pbst_config.reset_runtime_config_cache()
    yield
    pbst_config.reset_runtime_config_cache()


def test_runtime_config_defaults(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)

    runtime = pbst_config.runtime_config()

    assert runtime.log_level == "INFO"
    assert runtime.recursion_limit is None
    assert runtime.default_mode == "in_order"
    assert logging.getLogger("pbst").level == logging.INFO


def test_runtime_config_is_cached(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    first = pbst_config.runtime_config()
    monkeypatch.setenv("PBST_LOG_LEVEL", "DEBUG")
    assert pbst_config.runtime_config() is first

    pbst_config.reset_runtime_config_cache()
    assert pbst_config.runtime_config().log_level == "DEBUG"


def test_log_level_is_normalised(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_LOG_LEVEL", " warning ")

    assert pbst_config.runtime_config().log_level == "WARNING"


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        pbst_config.runtime_config()


def test_default_mode_override(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_DEFAULT_MODE", "pre-order")

    assert pbst_config.runtime_config().default_mode == "pre_order"


def test_invalid_default_mode(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_DEFAULT_MODE", "breadth_first")

    with pytest.raises(ValueError):
        pbst_config.runtime_config()


def test_recursion_limit_is_raised(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    original = sys.getrecursionlimit()
    target = original + 500
    monkeypatch.setenv("PBST_RECURSION_LIMIT", str(target))
    try:
        runtime = pbst_config.runtime_config()
        assert runtime.recursion_limit == target
        assert sys.getrecursionlimit() == target
        assert runtime.effective_recursion_limit == target
    finally:
        sys.setrecursionlimit(original)


def test_recursion_limit_is_never_lowered(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    original = sys.getrecursionlimit()
    monkeypatch.setenv("PBST_RECURSION_LIMIT", str(max(original - 100, 1)))

    pbst_config.runtime_config()

    assert sys.getrecursionlimit() == original


def test_recursion_limit_parsing(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_RECURSION_LIMIT", "lots")

    with pytest.raises(ValueError):
        pbst_config.runtime_config()


def test_recursion_limit_must_be_positive(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PBST_RECURSION_LIMIT", "0")

    with pytest.raises(ValueError):
        pbst_config.runtime_config()
