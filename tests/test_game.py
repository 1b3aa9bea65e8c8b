import logging

import pytest

from tic_tac_toe.board import empty_board
from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.game import TicTacToe
from tic_tac_toe.rules import DRAW, IN_PROGRESS, Won


def play(game: TicTacToe, moves: list[tuple[int, int]]) -> None:
    for row, col in moves:
        game.apply_move(row, col)


X_WINS_DIAGONAL = [(0, 0), (1, 0), (1, 1), (0, 1), (2, 2)]
DRAW_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


class TestInitialState:
    """Tests for a freshly created game."""

    def test_defaults(self) -> None:
        game = TicTacToe()
        assert game.board == empty_board()
        assert game.current_player == "X"
        assert game.first_player == "X"
        assert game.status == IN_PROGRESS

    def test_custom_first_player(self) -> None:
        game = TicTacToe(first_player="O")
        assert game.current_player == "O"


class TestApplyMove:
    """Tests for turn handling."""

    def test_players_alternate(self) -> None:
        game = TicTacToe()
        game.apply_move(0, 0)
        assert game.board[0, 0] == "X"
        assert game.current_player == "O"
        game.apply_move(1, 1)
        assert game.board[1, 1] == "O"
        assert game.current_player == "X"
        assert game.status == IN_PROGRESS

    def test_win_ends_game_without_switching_player(self) -> None:
        game = TicTacToe()
        play(game, X_WINS_DIAGONAL)
        assert game.status == Won("X")
        assert game.current_player == "X"

    def test_draw(self) -> None:
        game = TicTacToe()
        play(game, DRAW_GAME)
        assert game.board.is_full()
        assert game.status == DRAW

    def test_occupied_cell_rejected_and_state_kept(self) -> None:
        game = TicTacToe()
        game.apply_move(0, 0)
        board_before = game.board
        with pytest.raises(InvalidMoveError, match="Cell occupied"):
            game.apply_move(0, 0)
        assert game.board == board_before
        assert game.current_player == "O"

    def test_out_of_bounds_rejected(self) -> None:
        game = TicTacToe()
        with pytest.raises(InvalidMoveError, match="out of bounds"):
            game.apply_move(3, 0)
        assert game.board == empty_board()
        assert game.current_player == "X"

    def test_moves_after_game_over_rejected(self) -> None:
        game = TicTacToe()
        play(game, X_WINS_DIAGONAL)
        board_before = game.board
        with pytest.raises(InvalidMoveError, match="Game over") as exc_info:
            game.apply_move(2, 0)
        assert (exc_info.value.row, exc_info.value.col) == (2, 0)
        assert game.board == board_before

    def test_logs_result(self, caplog: pytest.LogCaptureFixture) -> None:
        game = TicTacToe()
        with caplog.at_level(logging.INFO, logger="tic_tac_toe.game"):
            play(game, X_WINS_DIAGONAL)
        assert "Player X won" in caplog.text


class TestCellEnabled:
    """Tests for the clickable cell rule."""

    def test_empty_cell_enabled_while_playing(self) -> None:
        game = TicTacToe()
        assert game.is_cell_enabled(0, 0)
        game.apply_move(0, 0)
        assert not game.is_cell_enabled(0, 0)
        assert game.is_cell_enabled(0, 1)

    def test_out_of_range_disabled(self) -> None:
        assert not TicTacToe().is_cell_enabled(-1, 0)

    def test_everything_disabled_after_game_over(self) -> None:
        game = TicTacToe()
        play(game, X_WINS_DIAGONAL)
        assert all(not game.is_cell_enabled(r, c) for r in range(3) for c in range(3))


class TestReset:
    """Tests for starting a new game."""

    def test_reset_after_win(self) -> None:
        game = TicTacToe(first_player="O")
        play(game, X_WINS_DIAGONAL)
        game.reset()
        assert game.board == empty_board()
        assert game.current_player == "O"
        assert game.status == IN_PROGRESS
        game.apply_move(1, 1)
        assert game.board[1, 1] == "O"


class TestStateUpdatedCallbacks:
    """Tests for change notifications."""

    def test_called_on_move_and_reset(self) -> None:
        game = TicTacToe()
        calls: list[str] = []
        game.add_state_updated_cb(lambda: calls.append("first"))
        game.add_state_updated_cb(lambda: calls.append("second"))

        game.apply_move(0, 0)
        game.reset()

        assert calls == ["first", "second", "first", "second"]

    def test_not_called_on_rejected_move(self) -> None:
        game = TicTacToe()
        game.apply_move(0, 0)
        calls: list[int] = []
        game.add_state_updated_cb(lambda: calls.append(1))
        with pytest.raises(InvalidMoveError):
            game.apply_move(0, 0)
        assert calls == []

    def test_callback_sees_updated_state(self) -> None:
        game = TicTacToe()
        seen: list[tuple[str, object]] = []
        game.add_state_updated_cb(lambda: seen.append((game.current_player, game.status)))
        play(game, X_WINS_DIAGONAL)
        assert seen[0] == ("O", IN_PROGRESS)
        assert seen[-1] == ("X", Won("X"))
