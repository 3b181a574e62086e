"""Command-line entry point."""

import json

import pytest

import servarr_tui.cli
from servarr_tui.cli import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert (args.config, args.print_config, args.init_config) == (None, False, False)

    def test_unknown_flag_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--nope"])


class TestInitConfig:
    def test_writes_once(self, config_path, capsys):
        assert main(["--init-config"]) == 0
        assert "Wrote default config" in capsys.readouterr().out
        written = json.loads(config_path.read_text(encoding="utf-8"))
        assert written["radarr"]["port"] == 7878

        assert main(["--init-config"]) == 1
        assert "Config already exists" in capsys.readouterr().out

    def test_explicit_path(self, tmp_path, capsys):
        target = tmp_path / "custom.json"
        assert main(["--init-config", "--config", str(target)]) == 0
        assert target.exists()


class TestPrintConfig:
    def test_prints_resolved_config(self, config_path, capsys):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"sonarr": {"host": "tv"}}), encoding="utf-8")
        assert main(["--print-config"]) == 0
        printed = json.loads(capsys.readouterr().out)
        assert printed["sonarr"]["host"] == "tv"
        assert "radarr" not in printed


class TestRun:
    def test_runs_app_with_loaded_config(self, config_path, log_dir, monkeypatch):
        launched = []

        class FakeApp:
            def __init__(self, config):
                self.config = config

            def run(self):
                launched.append(self.config)

        monkeypatch.setattr("servarr_tui.tui.app.ServarrTuiApp", FakeApp)
        assert servarr_tui.cli.main([]) == 0
        assert len(launched) == 1
        assert launched[0].radarr.port == 7878
        assert (log_dir / "servarr-tui.log").exists()
