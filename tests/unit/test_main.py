"""Unit tests for the command line tool (main.py)."""
from __future__ import annotations

import json

import pytest

import main as cli_main


def run(capsys, *argv):
    cli_main.main(list(argv))
    return capsys.readouterr().out


def test_show_prints_labelled_board(capsys, sgf_file, capture_sgf_content):
    out = run(capsys, "--mode", "show", "--data", sgf_file(capture_sgf_content))
    assert out.splitlines() == [
        "   A B C D E",
        " 5 . . . . .",
        " 4 . . . . .",
        " 3 . . . . .",
        " 2 O . . . .",
        " 1 . O . . X",
        "moves: 4",
    ]


def test_show_raw_with_move_limit(capsys, sgf_file, capture_sgf_content):
    path = sgf_file(capture_sgf_content)
    out = run(capsys, "--mode", "show", "--data", path, "--raw", "--moves", "2")
    assert out.splitlines() == [
        ". . . . . ",
        ". . . . . ",
        ". . . . . ",
        ". . . . . ",
        "# O . . . ",
        "moves: 2",
    ]


def test_show_lists_rejected_moves(capsys, sgf_file):
    out = run(capsys, "--mode", "show", "--data", sgf_file("(;SZ[5];B[aa];W[aa])"))
    assert out.splitlines()[-1] == "rejected: White A5 (node 2)"


def test_info_prints_json(capsys, sgf_file, simple_sgf_content):
    out = run(capsys, "--mode", "info", "--data", sgf_file(simple_sgf_content))
    data = json.loads(out)
    assert data["size"] == 9
    assert data["info"]["PB"] == "Alice"
    assert data["info"]["KM"] == 7.5


def test_groups_lists_liberties(capsys, sgf_file, capture_sgf_content):
    out = run(capsys, "--mode", "groups", "--data", sgf_file(capture_sgf_content))
    assert out.splitlines() == [
        "Black: E1 liberties=2",
        "White: A2 liberties=3",
        "White: B1 liberties=3",
    ]


def test_properties_describes_ids(capsys, sgf_file):
    out = run(capsys, "--mode", "properties", "--data", sgf_file("(;SZ[5]XY[1];B[aa])"))
    lines = set(out.splitlines())
    assert "SZ: Size (root)" in lines
    assert "B: Black (move)" in lines
    assert "XY: unknown property" in lines


def test_yaml_config_supplies_defaults(capsys, sgf_file, tmp_path, capture_sgf_content):
    config = tmp_path / "config.yaml"
    config.write_text("moves: 1\nraw: true\nlog_level: warning\n")
    out = run(
        capsys, "--mode", "show", "--data", sgf_file(capture_sgf_content),
        "--config", str(config),
    )
    assert out.splitlines()[-2:] == ["# . . . . ", "moves: 1"]


def test_command_line_beats_config(capsys, sgf_file, tmp_path, capture_sgf_content):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"moves": 1}))
    out = run(
        capsys, "--mode", "show", "--data", sgf_file(capture_sgf_content),
        "--config", str(config), "--moves", "3",
    )
    assert "moves: 3" in out


def test_load_config_missing_file(tmp_path, caplog):
    assert cli_main._load_config(str(tmp_path / "nope.yaml")) == {}
    assert "not found" in caplog.text


def test_load_config_none():
    assert cli_main._load_config(None) == {}


def test_load_config_ignores_non_mapping(tmp_path, caplog):
    config = tmp_path / "config.yaml"
    config.write_text("- moves\n- raw\n")
    assert cli_main._load_config(str(config)) == {}
    assert "expected a mapping" in caplog.text


def test_list_config_falls_back_to_defaults(capsys, sgf_file, tmp_path, capture_sgf_content):
    config = tmp_path / "config.json"
    config.write_text(json.dumps([1, 2]))
    out = run(
        capsys, "--mode", "show", "--data", sgf_file(capture_sgf_content),
        "--config", str(config),
    )
    assert "moves: 4" in out


def test_config_moves_given_as_text(capsys, sgf_file, tmp_path, capture_sgf_content):
    config = tmp_path / "config.yaml"
    config.write_text("moves: '2'\n")
    out = run(
        capsys, "--mode", "show", "--data", sgf_file(capture_sgf_content),
        "--config", str(config),
    )
    assert "moves: 2" in out


@pytest.mark.parametrize("value", ["two", "[1, 2]"], ids=["word", "list"])
def test_config_moves_not_a_number(tmp_path, sgf_file, capture_sgf_content, value):
    config = tmp_path / "config.yaml"
    config.write_text(f"moves: {value}\n")
    with pytest.raises(SystemExit) as exc:
        cli_main.main([
            "--mode", "show", "--data", sgf_file(capture_sgf_content),
            "--config", str(config),
        ])
    assert exc.value.code == 2


@pytest.mark.parametrize("argv", [
    ["--mode", "show"],
    ["--mode", "bogus", "--data", "x.sgf"],
    ["--mode", "show", "--data", "x.sgf", "--moves", "-1"],
], ids=["missing_data", "bad_mode", "negative_moves"])
def test_argument_errors(argv):
    with pytest.raises(SystemExit) as exc:
        cli_main.main(argv)
    assert exc.value.code == 2


def test_unreadable_record(tmp_path, sgf_file):
    with pytest.raises(SystemExit):
        cli_main.main(["--mode", "show", "--data", str(tmp_path / "missing.sgf")])
    with pytest.raises(SystemExit):
        cli_main.main(["--mode", "show", "--data", sgf_file("not sgf at all")])
