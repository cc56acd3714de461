"""Tests for configuration loading and saving."""

from pathlib import Path

import pytest

from bashbeatz.core.config import (
    SERVER_URL_ENV,
    Config,
    create_default_config,
    get_config_dir,
    get_data_dir,
    load_config,
    save_config,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep XDG lookups and env overrides away from the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv(SERVER_URL_ENV, raising=False)


class TestDirectories:
    def test_xdg_directories(self, tmp_path: Path) -> None:
        assert get_config_dir() == tmp_path / "config" / "bashbeatz"
        assert get_data_dir() == tmp_path / "data" / "bashbeatz"


class TestLoadConfig:
    def test_missing_file_creates_default(self, tmp_path: Path) -> None:
        path = tmp_path / "new" / "config.toml"
        config = load_config(path)

        assert path.exists()
        assert config == Config()

    def test_default_file_parses_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text(create_default_config(), encoding="utf-8")
        assert load_config(path) == Config()

    def test_sections_override_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text(
            """
[server]
base_url = "http://music.local:8080/"

[player]
player_command = "/opt/ffmpeg/ffplay"
probe_timeout = 5

[logging]
level = "debug"
log_file = "~/bb.log"
""",
            encoding="utf-8",
        )
        config = load_config(path)

        assert config.server.base_url == "http://music.local:8080"
        assert config.server.request_timeout == 10.0
        assert config.player.player_command == "/opt/ffmpeg/ffplay"
        assert config.player.probe_command == "ffprobe"
        assert config.player.probe_timeout == 5.0
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == str(Path("~/bb.log").expanduser())

    def test_env_overrides_server_url(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[server]\nbase_url = "http://from-file:3000"\n', encoding="utf-8")
        monkeypatch.setenv(SERVER_URL_ENV, "http://from-env:3000")

        assert load_config(path).server.base_url == "http://from-env:3000"

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[server\nbase_url = ", encoding="utf-8")
        assert load_config(path) == Config()


def test_save_then_load(tmp_path: Path) -> None:
    """Saved files are valid TOML that load back to the same values."""
    path = tmp_path / "config.toml"
    config = Config()
    config.server.base_url = "http://saved:1234"
    config.ui.show_banner = False

    assert save_config(config, path) is True
    assert load_config(path) == config
