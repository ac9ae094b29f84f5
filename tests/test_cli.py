"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from captureconfig.cli import format_flags, main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner isolated from any settings file in the working tree."""
    monkeypatch.setenv("CAPTURECONFIG_SETTINGS", str(tmp_path / "settings.json"))
    return CliRunner()


class TestShow:
    """Test the show command."""

    def test_show_json(self, runner):
        result = runner.invoke(
            main,
            [
                "show",
                "--module", "pcap",
                "--input", "eth0",
                "--snaplen", "1518",
                "--mode", "inline",
                "--flag", "0x1",
                "--flag", "0x2",
                "--var", "a=1",
                "--var", "b=2",
                "--var", "a=3",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["module"] == "pcap"
        assert data["input"] == "eth0"
        assert data["snaplen"] == 1518
        assert data["mode"] == "inline"
        assert data["flags"] == 3
        assert data["variables"] == [{"key": "b", "value": "2"}, {"key": "a", "value": "3"}]

    def test_show_defaults(self, runner):
        result = runner.invoke(main, ["show", "-m", "pcap", "--defaults", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["snaplen"] == 1518
        assert data["mode"] == "passive"

    def test_show_table(self, runner):
        result = runner.invoke(main, ["show", "-m", "afpacket", "-i", "eth0", "--var", "debug"])

        assert result.exit_code == 0, result.output
        assert "eth0" in result.output
        assert "debug" in result.output

    def test_show_bad_flag(self, runner):
        result = runner.invoke(main, ["show", "-m", "pcap", "--flag", "nope"])
        assert result.exit_code == 1
        assert "Invalid integer" in result.output

    def test_show_bad_variable(self, runner):
        result = runner.invoke(main, ["show", "-m", "pcap", "--var", "=x"])
        assert result.exit_code == 1

    def test_show_output_file(self, runner, tmp_path):
        out = tmp_path / "out" / "cfg.json"
        result = runner.invoke(main, ["show", "-m", "pcap", "--json", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["module"] == "pcap"

    def test_module_required(self, runner):
        result = runner.invoke(main, ["show"])
        assert result.exit_code == 2


class TestSettingsCommand:
    """Test the settings command."""

    def test_settings_from_file(self, runner, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"default_snaplen": 4096}))

        result = runner.invoke(main, ["--settings", str(path), "settings"])

        assert result.exit_code == 0, result.output
        assert "4096" in result.output

    def test_settings_save(self, runner, tmp_path):
        path = tmp_path / "saved.json"
        result = runner.invoke(main, ["settings", "--save", str(path)])

        assert result.exit_code == 0, result.output
        assert json.loads(path.read_text())["default_snaplen"] == 1518

    def test_invalid_settings_file(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(main, ["--settings", str(path), "settings"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_undecodable_settings_file(self, runner, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b'{"default_mode": "\xff\xfe"}')
        result = runner.invoke(main, ["--settings", str(path), "settings"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output

    def test_settings_env_points_at_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAPTURECONFIG_SETTINGS", str(tmp_path))
        result = CliRunner().invoke(main, ["settings"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output

    def test_mistyped_settings_value(self, runner, tmp_path):
        path = tmp_path / "typed.json"
        path.write_text(json.dumps({"default_mode": 5}))
        for args in (["settings"], ["show", "-m", "pcap", "--defaults"]):
            result = runner.invoke(main, ["--settings", str(path), *args])
            assert result.exit_code == 1
            assert isinstance(result.exception, SystemExit)
            assert "default_mode" in result.output


class TestFormatting:
    """Test output helpers."""

    def test_format_flags(self):
        assert format_flags(0) == "0x0"
        assert format_flags(0x1) == "0x1 (PROMISC)"
        assert format_flags(0x4) == "0x4"
