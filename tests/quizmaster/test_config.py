from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

from quizmaster.exceptions.config import InvalidEnvVar

_ENV_VARS = ("QUIZ_DB_PATH", "QUIZ_ADMIN_CODE", "QUIZ_LOG_LEVEL", "QUIZ_BADGE_PROVIDER", "QUIZ_LEADERBOARD_LIMIT")


def _load_config_fresh(monkeypatch, tmp_name: str = "quizmaster_config_under_test"):
    """Charge src/quizmaster/config.py sous un nom unique pour isoler les effets d'import."""
    # Empêche la .env locale de polluer les tests (sinon load_dotenv remet des vars)
    import dotenv
    monkeypatch.setattr(dotenv, "load_dotenv", lambda *a, **k: False)

    sys.modules.pop(tmp_name, None)

    cfg_path = Path(__file__).resolve().parents[2] / "src" / "quizmaster" / "config.py"
    spec = importlib.util.spec_from_file_location(tmp_name, cfg_path)
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    sys.modules[tmp_name] = mod
    spec.loader.exec_module(mod)  # type: ignore[arg-type]
    return mod


@pytest.fixture()
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_env_is_empty(monkeypatch, clean_env):
    mod = _load_config_fresh(monkeypatch, "cfg_defaults")

    assert mod.DB_PATH == "./data/quizmaster.db"
    assert mod.ADMIN_CODE is None
    assert mod.LOG_LEVEL == "INFO"
    assert mod.BADGE_PROVIDER == "placeholder"
    assert mod.LEADERBOARD_LIMIT == 100


def test_values_read_from_env(monkeypatch, clean_env):
    monkeypatch.setenv("QUIZ_DB_PATH", "/tmp/q.db")
    monkeypatch.setenv("QUIZ_ADMIN_CODE", "s3cret")
    monkeypatch.setenv("QUIZ_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUIZ_LEADERBOARD_LIMIT", "25")

    mod = _load_config_fresh(monkeypatch, "cfg_env")

    assert mod.DB_PATH == "/tmp/q.db"
    assert mod.ADMIN_CODE == "s3cret"
    assert mod.LOG_LEVEL == "DEBUG"
    assert mod.LEADERBOARD_LIMIT == 25


def test_env_helpers_optional_paths(monkeypatch, clean_env):
    mod = _load_config_fresh(monkeypatch, "cfg_helpers")

    monkeypatch.delenv("MISSING_INT", raising=False)
    assert mod.env_int_optional("MISSING_INT") is None

    monkeypatch.setenv("EMPTY_STR", "")
    assert mod.env_str_optional("EMPTY_STR") is None

    monkeypatch.setenv("BAD_INT", "abc")
    with pytest.raises(InvalidEnvVar) as exc:
        mod.env_int_optional("BAD_INT")
    assert exc.value.name == "BAD_INT"


def test_config_import_raises_on_non_integer_leaderboard_limit(monkeypatch, clean_env):
    monkeypatch.setenv("QUIZ_LEADERBOARD_LIMIT", "many")

    with pytest.raises(InvalidEnvVar):
        _load_config_fresh(monkeypatch, "cfg_bad_limit")


@pytest.mark.parametrize("value", ["0", "-3"])
def test_config_import_raises_on_non_positive_leaderboard_limit(monkeypatch, clean_env, value):
    monkeypatch.setenv("QUIZ_LEADERBOARD_LIMIT", value)

    with pytest.raises(InvalidEnvVar) as exc:
        _load_config_fresh(monkeypatch, f"cfg_limit_{value}")
    assert exc.value.expected == "positive integer"
