"""Tests for src/cli.py — the ``domino start`` command."""

import logging

import pytest

from src.cli import build_parser, main
from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in ("DEBUG", "LOG_LEVEL", "TILES_PER_HAND", "SEED"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)
    get_settings.cache_clear()


class TestParser:
    def test_start_names(self):
        args = build_parser().parse_args(["start", "Alice", "Bob"])
        assert args.command == "start"
        assert args.names == ["Alice", "Bob"]
        assert args.seed is None

    def test_start_without_names_parses(self):
        args = build_parser().parse_args(["start"])
        assert args.names == []

    def test_options(self):
        args = build_parser().parse_args(["start", "A", "B", "--seed", "4", "--tiles-per-hand", "5"])
        assert args.seed == 4
        assert args.tiles_per_hand == 5


class TestStart:
    def test_plays_a_match(self, capsys):
        assert main(["start", "Alice", "Bob", "--seed", "11"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Starting game...")
        assert "Alice gets the following tiles:" in out
        assert "Bob gets the following tiles:" in out
        assert "starts the game with" in out
        assert "wins in" in out or "Game ends with no winner:" in out

    def test_seeded_output_is_reproducible(self, capsys):
        main(["start", "Alice", "Bob", "--seed", "8"])
        first = capsys.readouterr().out
        main(["start", "Alice", "Bob", "--seed", "8"])
        assert capsys.readouterr().out == first

    def test_seed_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("SEED", "8")
        get_settings.cache_clear()
        main(["start", "Alice", "Bob"])
        from_env = capsys.readouterr().out
        main(["start", "Alice", "Bob", "--seed", "8"])
        assert capsys.readouterr().out == from_env

    @pytest.mark.parametrize("names", [[], ["Alice"], ["Alice", "Bob", "Carol"]])
    def test_requires_two_players(self, capsys, names):
        assert main(["start", *names]) == 1
        captured = capsys.readouterr()
        assert "Two players are needed to play!" in captured.err
        assert "Starting game" not in captured.out

    def test_duplicate_names(self, capsys):
        assert main(["start", "Alice", "Alice"]) == 1
        assert "must be distinct" in capsys.readouterr().err

    @pytest.mark.parametrize("size", ["0", "20"])
    def test_bad_hand_size(self, capsys, size):
        assert main(["start", "Alice", "Bob", "--tiles-per-hand", size]) == 1
        assert f"got {size}" in capsys.readouterr().err

    def test_explicit_hand_size_beats_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("TILES_PER_HAND", "3")
        get_settings.cache_clear()
        assert main(["start", "Alice", "Bob", "--seed", "2", "--tiles-per-hand", "1"]) == 0
        out = capsys.readouterr().out
        deals = [line for line in out.splitlines() if "gets the following tiles:" in line]
        assert len(deals) == 2
        assert all(line.count("<") == 1 for line in deals)

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: domino" in capsys.readouterr().out
