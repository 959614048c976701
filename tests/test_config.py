from __future__ import annotations

from pathlib import Path

import pytest

from flashdeck.config import AppConfig, load_config
from flashdeck.errors import ConfigError
from flashdeck.paths import DEFAULT_DECK_FILE


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("FLASHDECK_CONFIG", "FLASHDECK_DECK_FILE", "FLASHDECK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file() -> None:
    assert load_config() == AppConfig(deck_file=DEFAULT_DECK_FILE, log_level="INFO", goal_target=10)


def test_values_from_yaml(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    path = config_dir / "flashdeck.yml"
    path.write_text("deck_file: cards/deck.json\nlog_level: debug\ngoal_target: 3\n", encoding="utf-8")

    config = load_config(path)

    assert config.deck_file == config_dir.resolve() / "cards" / "deck.json"
    assert config.log_level == "DEBUG"
    assert config.goal_target == 3


def test_config_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("goal_target: 7\n", encoding="utf-8")
    monkeypatch.setenv("FLASHDECK_CONFIG", str(path))

    assert load_config().goal_target == 7


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / "flashdeck.yml").write_text("log_level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("FLASHDECK_DECK_FILE", "/tmp/other.json")
    monkeypatch.setenv("FLASHDECK_LOG_LEVEL", "warning")

    config = load_config()

    assert config.deck_file == Path("/tmp/other.json")
    assert config.log_level == "WARNING"


@pytest.mark.parametrize(
    "text",
    [
        "log_level: CHATTY\n",
        "goal_target: -1\n",
        "goal_target: lots\n",
        "- just\n- a list\n",
        "deck_file: [unclosed\n",
        "deck_file:\n",
        "deck_file: 5\n",
        "deck_file: '  '\n",
    ],
)
def test_invalid_config(tmp_path: Path, text: str) -> None:
    path = tmp_path / "flashdeck.yml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yml")


def test_directory_as_config_file(tmp_path: Path) -> None:
    config_dir = tmp_path / "flashdeck.yml"
    config_dir.mkdir()
    with pytest.raises(ConfigError):
        load_config(config_dir)
