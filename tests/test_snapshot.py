"""
Tests for JSON snapshots, settings, and the command line entry point.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from tripeaks.settings import DEFAULT_SETTINGS, load_settings, save_settings
from tripeaks.snapshot import (
    SnapshotError,
    board_from_dict,
    board_to_dict,
    load_board,
    save_board,
)
from tripeaks.solver import create_test_board


SMALL = {"pyramids": [[["5C"], ["6D", "7H"]]], "waste": ["8S"], "stock": []}


# ---------------------------------------------------------------- snapshots

def test_board_from_dict():
    board = board_from_dict(SMALL)
    assert board.total_cards == 3
    assert str(board.waste_top) == "8♠"
    assert board.stock == ()


def test_dict_uses_ascii_codes_and_nulls():
    board = board_from_dict({"pyramids": [[["10S"], [None, "AH"]]], "waste": ["QD"]})
    assert board_to_dict(board) == {
        "pyramids": [[["10S"], [None, "AH"]]],
        "waste": ["QD"],
        "stock": [],
    }


def test_save_and_load(tmp_path):
    board = create_test_board()
    path = tmp_path / "board.json"
    save_board(board, path)
    assert load_board(path) == board


@pytest.mark.parametrize("data", [
    [],
    {},
    {"pyramids": []},
    {"pyramids": ["row"]},
    {"pyramids": [[["5C"]]], "waste": "8S"},
    {"pyramids": [[["ZZ"]]]},
])
def test_malformed_snapshots(data):
    with pytest.raises(SnapshotError):
        board_from_dict(data)


def test_load_missing_and_invalid_files(tmp_path):
    with pytest.raises(SnapshotError):
        load_board(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError):
        load_board(bad)

    not_utf8 = tmp_path / "not_utf8.json"
    not_utf8.write_bytes(b'{"pyramids": [[["\xff\xfe"]]]}')
    with pytest.raises(SnapshotError):
        load_board(not_utf8)


# ---------------------------------------------------------------- settings

def test_settings_defaults_when_missing(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_settings_merge_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"time_budget_sec": 1.5}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["time_budget_sec"] == 1.5
    assert settings["max_iterations"] == DEFAULT_SETTINGS["max_iterations"]


def test_settings_invalid_file_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_settings_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, strategy_name="greedy")
    save_settings(settings, path)
    assert load_settings(path)["strategy_name"] == "greedy"


# ---------------------------------------------------------------- command line

def test_main_solves_snapshot(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "board.json"
    path.write_text(json.dumps(SMALL), encoding="utf-8")

    code = main.main([str(path), "--time-budget", "5"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Success: True" in out
    assert "1. Play 7♥ on 8♠" in out


def test_main_greedy_reports_partial(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"pyramids": [[["KC"]]], "waste": ["5H"]}), encoding="utf-8")

    code = main.main([str(path), "--strategy", "greedy"])

    assert code == 1
    assert "Success: False" in capsys.readouterr().out


def test_main_rejects_bad_snapshot(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"pyramids": [[["??"]]]}), encoding="utf-8")

    assert main.main([str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_main_rejects_undecodable_snapshot(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "board.json"
    path.write_bytes(b"\xff\xfe")

    assert main.main([str(path)]) == 2
    assert "error:" in capsys.readouterr().err


@pytest.mark.parametrize("strategy", ["dfs", "greedy"])
@pytest.mark.parametrize("flags", [
    ["--max-iterations", "0"],
    ["--time-budget", "0"],
    ["-n", "-3"],
    ["-t", "-1.5"],
])
def test_main_rejects_non_positive_budgets(tmp_path, monkeypatch, capsys, strategy, flags):
    monkeypatch.chdir(tmp_path)

    assert main.main(["--strategy", strategy] + flags) == 2

    captured = capsys.readouterr()
    assert "budgets must be positive" in captured.err
    assert "SOLUTION" not in captured.out


def test_main_help_lists_strategy_descriptions(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--help"])

    out = capsys.readouterr().out
    assert "dfs:" in out
    assert "greedy:" in out
