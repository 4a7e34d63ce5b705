"""Tests for the command line tool."""

import json

import pytest

from pgnumeric.cli import main


class TestCli:
    """Tests for pgnumeric sub-commands."""

    def test_encode(self, capsys):
        assert main(["encode", "-123.456"]) == 0
        out = capsys.readouterr().out
        assert json.loads(out) == {
            "sign": "negative",
            "weight": 0,
            "scale": 3,
            "digits": [123, 4560],
        }

    def test_decode(self, capsys):
        wire = json.dumps({"sign": "positive", "weight": -1, "scale": 2, "digits": [100]})
        assert main(["decode", wire]) == 0
        assert capsys.readouterr().out.strip() == "0.0100"

    def test_decode_nan_fails(self, capsys):
        assert main(["decode", '{"sign": "nan"}']) == 1
        assert "NaN" in capsys.readouterr().err

    def test_decode_invalid_json_fails(self, capsys):
        assert main(["decode", '{"sign": "positive"}']) == 1
        assert "Error" in capsys.readouterr().err

    def test_pack(self, capsys):
        assert main(["pack", "10001"]) == 0
        assert capsys.readouterr().out.strip() == "000200010000000000010001"

    def test_unpack(self, capsys):
        assert main(["unpack", "0002000100000000", "00010001"]) == 0
        assert capsys.readouterr().out.strip() == "10001"

    def test_unpack_bad_hex_fails(self, capsys):
        assert main(["unpack", "zz"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_nan_disabled_by_env(self, capsys, monkeypatch):
        monkeypatch.setenv("PGNUMERIC_ENCODE_NAN", "false")
        assert main(["encode", "NaN"]) == 1
        assert "NaN" in capsys.readouterr().err

    def test_invalid_decimal_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "abc"])
        assert exc_info.value.code == 2

    def test_verbose_logs_to_stderr(self, capsys):
        assert main(["--verbose", "encode", "1"]) == 0
        captured = capsys.readouterr()
        assert "numeric_encoded" in captured.err
        assert json.loads(captured.out)["digits"] == [1]

    def test_invalid_env_config_fails(self, capsys, monkeypatch):
        monkeypatch.setenv("PGNUMERIC_MAX_SCALE", "abc")
        assert main(["encode", "1"]) == 1
        assert "Error" in capsys.readouterr().err
