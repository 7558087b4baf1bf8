"""
Tests for the ircline command line entry point
"""

import io
import json

import pytest

from ircline import cli
from ircline.errors import FormatError

GOOD_INPUT = (
    "@id=123;name=rick :nick!user@host.tmi.twitch.tv PRIVMSG #rickastley :Never gonna give you up!\r\n"
    "PING tmi.twitch.tv\r\n"
)


def _write(tmp_path, content, name="input.txt"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8", newline="")
    return str(path)


def _json_lines(out):
    return [json.loads(line) for line in out.splitlines() if line]


def test_main_outputs_json(tmp_path, capsys):
    path = _write(tmp_path, GOOD_INPUT)
    assert cli.main([path]) == 0
    objs = _json_lines(capsys.readouterr().out)
    assert objs == [
        {
            "tags": {"id": "123", "name": "rick"},
            "source": ":nick!user@host.tmi.twitch.tv",
            "command": "PRIVMSG",
            "params": ["#rickastley", "Never gonna give you up!"],
        },
        {"tags": {}, "source": None, "command": "PING", "params": ["tmi.twitch.tv"]},
    ]


def test_main_wire_output(tmp_path, capsys):
    path = _write(tmp_path, "PRIVMSG #a :hello world\n")
    assert cli.main([path, "--output", "wire"]) == 0
    assert capsys.readouterr().out == "PRIVMSG #a :hello world\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("PING a\n"))
    assert cli.main([]) == 0
    assert _json_lines(capsys.readouterr().out)[0]["params"] == ["a"]


def test_main_stdin_lone_carriage_return_matches_file(tmp_path, monkeypatch, capsys):
    raw = b"PING a\rb\r\n"
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8"))
    assert cli.main([]) == 0
    from_stdin = _json_lines(capsys.readouterr().out)
    path = _write(tmp_path, raw.decode("utf-8"))
    assert cli.main([path, "--keep-going"]) == 0
    from_file = _json_lines(capsys.readouterr().out)
    assert from_stdin == from_file
    assert from_stdin[0]["params"] == ["ab"]


def test_main_batch_failure_prints_nothing(tmp_path, capsys):
    path = _write(tmp_path, "PING a\nPING\nPING b\n")
    assert cli.main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "command is not terminated by a space" in captured.err


def test_main_keep_going(tmp_path, capsys):
    path = _write(tmp_path, "PING a\nPING\n\nPING b\n")
    assert cli.main([path, "--keep-going"]) == 1
    captured = capsys.readouterr()
    assert [o["params"] for o in _json_lines(captured.out)] == [["a"], ["b"]]
    assert "lineno=2" in captured.err
    assert "ERROR SUMMARY REPORT" in captured.err


def test_main_keep_going_all_good(tmp_path, capsys):
    path = _write(tmp_path, GOOD_INPUT)
    assert cli.main([path, "--keep-going"]) == 0
    assert len(_json_lines(capsys.readouterr().out)) == 2


def test_main_allow_bare_tags_flag(tmp_path, capsys):
    path = _write(tmp_path, "@flag CMD x\n")
    assert cli.main([path]) == 1
    capsys.readouterr()
    assert cli.main([path, "--allow-bare-tags"]) == 0
    assert _json_lines(capsys.readouterr().out)[0]["tags"] == {"flag": ""}


def test_main_config_file(tmp_path, capsys):
    path = _write(tmp_path, "@flag CMD x\n")
    config = _write(tmp_path, json.dumps({"allow_bare_tags": True}), "cfg.json")
    assert cli.main([path, "--config", config]) == 0


def test_main_invalid_config(tmp_path, capsys):
    path = _write(tmp_path, "PING a\n")
    config = _write(tmp_path, json.dumps({"unknown": 1}), "cfg.json")
    assert cli.main([path, "--config", config]) == 2
    assert "[CONFIG]" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt")]) == 2
    assert "[IO]" in capsys.readouterr().err


def test_main_wire_output_keeps_empty_middle_params(tmp_path, capsys):
    path = _write(tmp_path, "CMD a  b\n:nick!u@h JOIN #a\n")
    assert cli.main([path, "--output", "wire"]) == 0
    assert capsys.readouterr().out == "CMD a  b\n:nick!u@h JOIN #a\n"


def test_main_format_failure(tmp_path, monkeypatch, capsys):
    def fail(message):
        raise FormatError("cannot render", data={"field": "param"})

    monkeypatch.setattr(cli, "format_message", fail)
    path = _write(tmp_path, "PING a\n")
    assert cli.main([path, "--output", "wire"]) == 1
    assert "[FORMAT]" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--debug"])
def test_main_debug_logs_config(tmp_path, capsys, flag):
    path = _write(tmp_path, "PING a\n")
    assert cli.main([path, flag]) == 0
    assert "config_loaded" in capsys.readouterr().err
