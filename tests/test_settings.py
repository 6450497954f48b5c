# tests/test_settings.py
import pytest

pytest.importorskip("pygame")

from gridpath.app.viewer import DEFAULTS, resolve_settings  # noqa: E402


def test_defaults_without_overrides():
    assert resolve_settings([], {}) == DEFAULTS


def test_flags_override_environment():
    settings = resolve_settings(
        ["--algo=bfs", "--width=30"],
        {"GRIDPATH_WIDTH": "10", "GRIDPATH_HEIGHT": "12", "GRIDPATH_ALGO": "dfs"},
    )
    assert settings["algo"] == "bfs"
    assert settings["width"] == 30
    assert settings["height"] == 12


def test_speed_is_clamped():
    assert resolve_settings(["--speed=500"], {})["speed"] == 60
    assert resolve_settings([], {"GRIDPATH_SPEED": "0"})["speed"] == 1


def test_bad_values_fall_back(capsys):
    settings = resolve_settings(["--width=wide", "--algo=greedy", "--height=-3"], {})
    assert settings["width"] == DEFAULTS["width"]
    assert settings["height"] == DEFAULTS["height"]
    assert settings["algo"] == DEFAULTS["algo"]
    assert "Ignoring" in capsys.readouterr().out


def test_algo_aliases_and_seed():
    settings = resolve_settings(["--algo=A*", "--seed=42", "--log=debug"], {})
    assert settings["algo"] == "astar"
    assert settings["seed"] == 42
    assert settings["log"] == "DEBUG"
