"""Tests for connect_four/interfaces/cli.py, driving console input through monkeypatch"""

from typing import Callable, Iterable, List

import pytest

from connect_four.game.board import Board
from connect_four.interfaces.cli import NO_ROOM_MESSAGE, ConsoleMoveSource, main, parse_moves
from connect_four.utils import ROWS, Disc

FeedInput = Callable[[Iterable[str]], List[str]]


@pytest.fixture
def feed_input(monkeypatch: pytest.MonkeyPatch) -> FeedInput:
    """Replace input() with the given answers; returns the list of prompts shown."""

    def _feed(answers: Iterable[str]) -> List[str]:
        remaining = iter(answers)
        prompts: List[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed


def test_console_source_converts_to_zero_based(feed_input: FeedInput, empty_board: Board) -> None:
    prompts = feed_input(["4"])
    assert ConsoleMoveSource("Ann").get_move(empty_board) == 3
    assert prompts == ["Ann, enter your move (1-7): "]


def test_console_source_reprompts_on_bad_input(feed_input: FeedInput, empty_board: Board) -> None:
    prompts = feed_input(["abc", "0", "8", " 7 "])
    assert ConsoleMoveSource("Ann").get_move(empty_board) == 6
    assert prompts[1:] == ["No Available Move. Enter a number between 1 and 7: "] * 3


def test_console_source_rejects_full_column(feed_input: FeedInput, empty_board: Board,
                                            capsys: pytest.CaptureFixture[str]) -> None:
    for i in range(ROWS):
        empty_board.place_disc(0, Disc.RED if i % 2 else Disc.YELLOW)
    feed_input(["1", "2"])

    assert ConsoleMoveSource("Bo").get_move(empty_board) == 1
    assert NO_ROOM_MESSAGE in capsys.readouterr().out


def test_parse_moves() -> None:
    assert parse_moves("3, 2,3,") == [3, 2, 3]
    with pytest.raises(ValueError):
        parse_moves("3,x")


def test_play_session_with_replay(feed_input: FeedInput,
                                  capsys: pytest.CaptureFixture[str]) -> None:
    first_game = ["4", "1", "4", "2", "4", "1", "4"]
    second_game = ["1", "7", "1", "7", "2", "7", "2", "7"]
    prompts = feed_input(first_game + ["maybe", "y"] + second_game + ["no"])

    assert main(["play"]) == 0

    out = capsys.readouterr().out
    assert "Player 1 is WINNER!" in out
    assert "Player 2 is WINNER!" in out
    assert "Please answer y or n." in out
    assert out.rstrip().endswith("Thanks for playing!")
    assert prompts.count("Play again? (y/n): ") == 3
    # the second game starts from an empty board
    assert prompts[9] == "Player 1, enter your move (1-7): "


def test_play_uses_custom_names(feed_input: FeedInput,
                                capsys: pytest.CaptureFixture[str]) -> None:
    prompts = feed_input(["4", "1", "4", "1", "4", "1", "4", "n"])
    assert main(["play", "--red-name", "Ann", "--yellow-name", "Bo"]) == 0
    assert prompts[:2] == ["Ann, enter your move (1-7): ", "Bo, enter your move (1-7): "]
    assert "Ann is WINNER!" in capsys.readouterr().out


def test_end_of_input_ends_session(feed_input: FeedInput,
                                   capsys: pytest.CaptureFixture[str]) -> None:
    feed_input(["4"])
    assert main([]) == 0
    assert "Goodbye." in capsys.readouterr().out


def test_simulate_reports_winner(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["simulate", "--moves", "3,0,3,1,3,0,3,5,5"]) == 0
    out = capsys.readouterr().out
    assert "Red is WINNER!" in out
    assert "Ignored 2 moves" in out


def test_simulate_with_short_script(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["simulate", "--moves", "3,4"]) == 1
    assert "Script ended after 2 moves" in capsys.readouterr().out


def test_simulate_with_bad_moves(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["simulate", "--moves", "a,b"]) == 2
    assert "Error:" in capsys.readouterr().out


def test_show_reports_four_in_a_row(capsys: pytest.CaptureFixture[str]) -> None:
    rows = ["......."] * 5 + ["YYYRRRR"]
    assert main(["show", "--rows", *rows]) == 0
    out = capsys.readouterr().out
    assert "Y Y Y R R R R" in out
    assert "Red has four in a row: [(5, 3), (5, 4), (5, 5), (5, 6)]" in out
    assert "Yellow" not in out


def test_show_full_board_without_lines(draw_rows: List[str],
                                       capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "--rows", *draw_rows]) == 0
    out = capsys.readouterr().out
    assert "No four in a row." in out
    assert "The board is full." in out


def test_show_rejects_floating_disc(capsys: pytest.CaptureFixture[str]) -> None:
    rows = ["R......"] + ["......."] * 5
    assert main(["show", "--rows", *rows]) == 2
    assert "above an empty cell" in capsys.readouterr().out
