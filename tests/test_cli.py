#
# Datasize - CLI Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from datasize.cli import build_parser, format_values, main, resolve_options
from datasize.config import FormatOptions
from datasize.suffixes import GNU, GNU_SI, ISO80000, SI


# Tests ----------------------------------------------------------------------------------------------------------------

class TestMain:

    def test_values(self, capsys):
        assert main(["--separator", ".", "2000000", "950", "0"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1.9 MiB", "950 B", "0 B"]

    def test_decimal(self, capsys):
        assert main(["--decimal", "--separator", ",", "2000000"]) == 0
        assert capsys.readouterr().out == "2,0 MB\n"

    def test_suffixes_flag(self, capsys):
        assert main(["-b", "--suffixes", "gnu", "--separator", ".", "2000000"]) == 0
        assert capsys.readouterr().out == "1.9M\n"

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1000 2000000\n\n1256\n"))
        assert main(["-d", "--separator", "."]) == 0
        assert capsys.readouterr().out.splitlines() == ["1 kB", "2.0 MB", "1 kB"]

    def test_invalid_values_continue(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="datasize.cli"):
            assert main(["--separator", ".", "-5", "abc", "1024"]) == 1
        assert capsys.readouterr().out == "1 KiB\n"
        assert "'-5'" in caplog.text
        assert "'abc'" in caplog.text

    def test_config_file(self, capsys, config_file):
        path = config_file('[datasize]\nbase = "decimal"\nsuffixes = "gnu_si"\ndecimal_separator = ","\n')
        assert main(["--config", str(path), "2500000"]) == 0
        assert capsys.readouterr().out == "2,5M\n"

    def test_flags_override_config(self, capsys, config_file):
        path = config_file('[datasize]\nbase = "decimal"\ndecimal_separator = ","\n')
        assert main(["--config", str(path), "--binary", "--separator", ".", "2000000"]) == 0
        assert capsys.readouterr().out == "1.9 MiB\n"

    def test_config_decimal_base_uses_si(self, capsys, config_file):
        path = config_file('[datasize]\nbase = "decimal"\n')
        assert main(["--config", str(path), "--separator", ".", "2000000"]) == 0
        assert capsys.readouterr().out == "2.0 MB\n"

    def test_config_suffixes_survive_decimal_flag(self, capsys, config_file):
        path = config_file('[datasize]\nsuffixes = "iso80000"\n')
        assert main(["--config", str(path), "-d", "--separator", ".", "2000000"]) == 0
        assert capsys.readouterr().out == "2.0 MiB\n"

    def test_bad_config(self, caplog, config_file):
        path = config_file('[datasize]\nbase = "octal"\n')
        assert main(["--config", str(path), "1"]) == 1
        assert "Cannot load configuration" in caplog.text

    def test_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--binary", "--decimal", "1"])
        assert exc_info.value.code == 2


class TestResolveOptions:

    @pytest.mark.parametrize(
        "argv, use_binary, suffixes",
        [
            pytest.param([], True, ISO80000, id="defaults"),
            pytest.param(["-d"], False, SI, id="decimal-switches-to-si"),
            pytest.param(["-b"], True, ISO80000, id="binary"),
            pytest.param(["-d", "--suffixes", "gnu"], False, GNU, id="explicit-suffixes"),
        ],
    )
    def test_flags(self, argv, use_binary, suffixes):
        options = resolve_options(build_parser().parse_args(argv))
        assert options.use_binary is use_binary
        assert options.unit_suffixes is suffixes

    def test_config_suffixes_kept(self, config_file):
        path = config_file('suffixes = "gnu_si"\n')
        options = resolve_options(build_parser().parse_args(["--config", str(path), "-d"]))
        assert options.unit_suffixes is GNU_SI

    @pytest.mark.parametrize(
        "config, argv, suffixes",
        [
            pytest.param('base = "decimal"\n', [], SI, id="config-decimal"),
            pytest.param('base = "decimal"\n', ["-b"], ISO80000, id="flag-binary-over-config"),
            pytest.param('suffixes = "iso80000"\n', ["-d"], ISO80000, id="config-iso80000-kept"),
            pytest.param('base = "binary"\nsuffixes = "si"\n', ["--suffixes", "gnu"], GNU, id="flag-suffixes-win"),
        ],
    )
    def test_config_and_flags(self, config_file, config, argv, suffixes):
        path = config_file(config)
        options = resolve_options(build_parser().parse_args(["--config", str(path), *argv]))
        assert options.unit_suffixes is suffixes


class TestFormatValues:

    def test_counts_failures(self):
        out = io.StringIO()
        failures = format_values(["1", "x", "2.5", "2048"], FormatOptions(decimal_separator="."), out)
        assert failures == 2
        assert out.getvalue() == "1 B\n2 KiB\n"
