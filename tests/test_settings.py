"""Config parsing, path resolution, and the atomic settings writer."""

import json

import pytest

from servarr_tui.settings import (
    CONFIG_ENV,
    Config,
    ServerConfig,
    get_config_path,
    load_config,
    load_settings,
    save_settings,
)


class TestServerConfig:
    @pytest.mark.parametrize(
        "server, expected",
        [
            pytest.param(ServerConfig(host="nas", port=7878), "http://nas:7878", id="host-port"),
            pytest.param(ServerConfig(host="nas", port=443, ssl=True), "https://nas:443", id="ssl"),
            pytest.param(ServerConfig(host="nas"), "http://nas", id="no-port"),
            pytest.param(
                ServerConfig(host="ignored", port=1, uri="https://tv.example.com/sonarr/"),
                "https://tv.example.com/sonarr",
                id="uri-wins",
            ),
        ],
    )
    def test_base_url(self, server, expected):
        assert server.base_url == expected

    def test_default_port_applies_when_missing(self):
        server = ServerConfig.from_dict({"host": "nas", "api_token": "k"}, 8989)
        assert server == ServerConfig(host="nas", port=8989, api_token="k")

    def test_port_strings_are_coerced(self):
        assert ServerConfig.from_dict({"port": "7879"}).port == 7879


class TestConfig:
    def test_empty_falls_back_to_local_radarr(self):
        config = Config.from_dict({})
        assert config.radarr == ServerConfig(port=7878)
        assert config.sonarr is None

    def test_sonarr_only(self):
        config = Config.from_dict({"sonarr": {"host": "tv"}})
        assert config.radarr is None
        assert config.sonarr.base_url == "http://tv:8989"

    def test_non_dict_server_block_disables_it(self):
        config = Config.from_dict({"radarr": "yes", "sonarr": {}})
        assert config.radarr is None
        assert config.sonarr is not None

    def test_tick_values_clamped(self):
        config = Config.from_dict({"tick_rate_ms": 0, "tick_until_poll": -5})
        assert (config.tick_rate_ms, config.tick_until_poll) == (1, 1)

    def test_to_dict_round_trip(self):
        data = {
            "radarr": {"host": "nas", "port": 7878, "uri": None, "api_token": "k", "ssl": False},
            "tick_rate_ms": 100,
            "tick_until_poll": 50,
        }
        assert Config.from_dict(data).to_dict() == data


class TestConfigPath:
    def test_override_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "env.json"))
        assert get_config_path(str(tmp_path / "cli.json")) == tmp_path / "cli.json"

    def test_env(self, config_path):
        assert get_config_path() == config_path

    def test_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "servarr-tui" / "config.json"


class TestLoadAndSave:
    def test_missing_file_is_empty(self, config_path):
        assert load_settings(config_path) == {}

    def test_corrupt_file_is_empty(self, config_path, caplog):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{not json", encoding="utf-8")
        assert load_settings(config_path) == {}
        assert "ignoring unreadable config" in caplog.text

    def test_non_object_is_empty(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(config_path) == {}

    def test_save_creates_parents_and_leaves_no_temp(self, config_path):
        save_settings(config_path, {"tick_rate_ms": 100})
        assert json.loads(config_path.read_text(encoding="utf-8")) == {"tick_rate_ms": 100}
        assert [p.name for p in config_path.parent.iterdir()] == ["config.json"]

    def test_load_config_reads_env_path(self, config_path):
        save_settings(config_path, {"sonarr": {"host": "tv", "api_token": "abc"}})
        config = load_config()
        assert config.sonarr.api_token == "abc"
        assert config.radarr is None

    def test_bad_values_fall_back_to_defaults(self, config_path, caplog):
        save_settings(config_path, {"tick_rate_ms": "fast"})
        assert load_config() == Config.from_dict({})
        assert "invalid values" in caplog.text
