import logging
from collections.abc import Callable

from tic_tac_toe.board import Board, Marker, apply_move, empty_board, is_valid_move, other_marker
from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.rules import IN_PROGRESS, Draw, InProgress, Status, Won, derive_status, is_game_over

logger = logging.getLogger(__name__)


class TicTacToe:
    """Game state owned by the UI: current board, player to move and cached status.

    Every successful move or reset replaces the board and recomputes the status
    from it, then calls the registered state updated callbacks.
    """

    def __init__(self, first_player: Marker = "X") -> None:
        self._first_player: Marker = first_player
        self._board = empty_board()
        self._current_player: Marker = first_player
        self._status: Status = IN_PROGRESS
        self._state_updated_cbs: list[Callable[[], None]] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Marker:
        return self._current_player

    @property
    def status(self) -> Status:
        return self._status

    @property
    def first_player(self) -> Marker:
        return self._first_player

    def add_state_updated_cb(self, callback: Callable[[], None]) -> None:
        self._state_updated_cbs.append(callback)

    def is_cell_enabled(self, row: int, col: int) -> bool:
        return not is_game_over(self._status) and is_valid_move(self._board, row, col)

    def apply_move(self, row: int, col: int) -> None:
        if is_game_over(self._status):
            raise InvalidMoveError(row, col, "Game over.")

        self._board = apply_move(self._board, row, col, self._current_player)
        self._status = derive_status(self._board)
        logger.debug("Player %s played (%d, %d)", self._current_player, row, col)

        match self._status:
            case Won(winner):
                logger.info("Player %s won", winner)
            case InProgress():
                self._current_player = other_marker(self._current_player)
            case Draw():
                logger.info("Game ended in a draw")

        self._notify_state_updated()

    def reset(self) -> None:
        self._board = empty_board()
        self._current_player = self._first_player
        self._status = IN_PROGRESS
        logger.info("New game, player %s starts", self._first_player)
        self._notify_state_updated()

    def _notify_state_updated(self) -> None:
        for callback in list(self._state_updated_cbs):
            callback()
