"""Unit tests for color_printer.commands.colorprint module."""
import json

import pytest

from color_printer.commands.colorprint import coerce_arg, main


class TestCoerceArg:
    """Tests for shell argument coercion."""

    def test_int(self):
        assert coerce_arg("5") == 5

    def test_float(self):
        assert coerce_arg("33.333") == 33.333

    def test_string(self):
        assert coerce_arg("five") == "five"


class TestSay:
    """Tests for the say command."""

    def test_template_with_args(self, temp_config_dir, capsys):
        main(["say", "-c", "yellow", "-t", "WARN", "%d items, %.2f%% done", "5", "33.333"])
        assert capsys.readouterr().out == "\x1b[33m[WARN] 5 items, 33.33% done\x1b[0m\n"

    def test_percent_without_args(self, temp_config_dir, capsys):
        main(["say", "-c", "blue", "100% complete"])
        assert capsys.readouterr().out == "\x1b[34m[INFO] 100% complete\x1b[0m\n"

    def test_color_from_tag(self, temp_config_dir, capsys):
        """Without --color the tag's configured color is used."""
        main(["say", "-t", "ERROR", "disk full"])
        assert capsys.readouterr().out == "\x1b[31m[ERROR] disk full\x1b[0m\n"

    def test_defaults_from_config(self, mock_config, capsys):
        """Tag and color come from the config file."""
        main(["say", "hello"])
        assert capsys.readouterr().out == "\x1b[37m[NOTE] hello\x1b[0m\n"

    def test_unknown_color_exits_1(self, temp_config_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["say", "-c", "orange", "hi"])

        assert exc_info.value.code == 1
        assert "Unknown color 'orange'" in capsys.readouterr().err

    def test_malformed_severities_exits_1(self, temp_config_dir, capsys):
        """A scalar severities section is a config error, not a crash."""
        main(["config", "set", "severities", "red"])
        capsys.readouterr()

        with pytest.raises(SystemExit) as exc_info:
            main(["say", "hi"])

        assert exc_info.value.code == 1
        assert "severities" in capsys.readouterr().err

    def test_verbose_logs_to_stderr(self, temp_config_dir, capsys):
        main(["--verbose", "say", "hi"])
        captured = capsys.readouterr()
        assert "say: tag=INFO" in captured.err
        assert "[INFO] hi" in captured.out


class TestDots:
    """Tests for the dots command."""

    def test_runs_ticks_and_ends_line(self, temp_config_dir, capsys):
        main(["dots", "-n", "3", "-c", "red", "--interval", "0"])
        out = capsys.readouterr().out
        assert out.endswith("\r\x1b[31m[INFO] ...\x1b[0m\n")
        assert out.count("\r") == 3

    def test_wraps_past_max(self, temp_config_dir, capsys):
        main(["dots", "-n", "101", "--interval", "0"])
        out = capsys.readouterr().out
        assert "\r" + " " * 107 + "\r" in out
        assert out.endswith("\r\x1b[32m[INFO] .\x1b[0m\n")

    def test_color_from_config(self, mock_config, capsys):
        main(["dots", "-n", "1"])
        assert capsys.readouterr().out == "\r\x1b[36m[INFO] .\x1b[0m\n"

    def test_zero_ticks_prints_nothing(self, temp_config_dir, capsys):
        main(["dots", "-n", "0", "--interval", "0"])
        assert capsys.readouterr().out == ""

    def test_negative_count_is_usage_error(self, temp_config_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["dots", "-n", "-1"])

        assert exc_info.value.code == 2
        assert "must not be negative" in capsys.readouterr().err

    def test_negative_interval_is_usage_error(self, temp_config_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["dots", "-n", "1", "--interval", "-0.5"])

        assert exc_info.value.code == 2

    def test_bad_configured_interval_exits_1(self, temp_config_dir, capsys):
        main(["config", "set", "indicator.interval_seconds", "soon"])
        capsys.readouterr()

        with pytest.raises(SystemExit) as exc_info:
            main(["dots", "-n", "1"])

        assert exc_info.value.code == 1
        assert "interval_seconds" in capsys.readouterr().err


class TestPalette:
    """Tests for the palette command."""

    def test_lists_every_color(self, capsys):
        main(["palette"])
        out = capsys.readouterr().out
        for name in ("red", "green", "yellow", "blue", "magenta", "cyan", "white"):
            assert name in out
        assert "\\x1b[35m" in out


class TestConfigCommands:
    """Tests for the config subcommands."""

    def test_show_defaults(self, temp_config_dir, capsys):
        main(["config", "show"])
        out = capsys.readouterr().out
        assert "No configuration file found" in out
        assert '"severities"' in out

    def test_show_file(self, mock_config, capsys):
        main(["config", "show"])
        assert json.loads(capsys.readouterr().out) == mock_config

    def test_get_value(self, mock_config, capsys):
        main(["config", "get", "defaults.tag"])
        assert capsys.readouterr().out.strip() == "NOTE"

    def test_get_section_as_json(self, temp_config_dir, capsys):
        main(["config", "get", "indicator"])
        assert json.loads(capsys.readouterr().out)["color"] == "green"

    def test_get_missing_key_exits_1(self, temp_config_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "get", "nonexistent.key"])

        assert exc_info.value.code == 1
        assert "Key not found" in capsys.readouterr().err

    def test_set_auto_inits_and_parses_json(self, temp_config_dir, capsys):
        from color_printer.core import config as config_module

        main(["config", "set", "indicator.interval_seconds", "0.2"])
        out = capsys.readouterr().out
        assert "Created config file" in out
        assert "[OK] Set indicator.interval_seconds = 0.2" in out

        saved = json.loads(config_module.CP_CONFIG_FILE.read_text())
        assert saved["indicator"]["interval_seconds"] == 0.2

    def test_set_plain_string(self, mock_config, capsys):
        from color_printer.core import config as config_module

        main(["config", "set", "severities.NOTICE", "green"])
        saved = json.loads(config_module.CP_CONFIG_FILE.read_text())
        assert saved["severities"]["NOTICE"] == "green"

    def test_init_refuses_existing(self, mock_config, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "init"])

        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().err

    def test_init_force_backs_up(self, mock_config, temp_config_dir, capsys):
        main(["config", "init", "--force"])
        out = capsys.readouterr().out
        assert "Backed up existing config" in out
        assert (temp_config_dir / "config.json.bak").exists()

    def test_path(self, temp_config_dir, capsys):
        main(["config", "path"])
        assert capsys.readouterr().out.strip() == str(temp_config_dir / "config.json")


class TestMain:
    """Tests for the entry point itself."""

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 0
        assert "colorprint" in capsys.readouterr().out

    def test_unknown_command_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["shout"])

        assert exc_info.value.code == 2
