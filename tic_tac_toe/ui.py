import logging
from abc import ABC, abstractmethod

from tic_tac_toe.board import Marker
from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.game import TicTacToe
from tic_tac_toe.rules import Draw, InProgress, Status, Won

logger = logging.getLogger(__name__)


def status_message(status: Status, current_player: Marker) -> str:
    match status:
        case InProgress():
            return f"Player {current_player}'s turn"
        case Won(winner):
            return f"Winner: {winner}"
        case Draw():
            return "It's a draw"


class Ui(ABC):
    def __init__(self, game: TicTacToe) -> None:
        self._game = game
        self._running = False
        self._game.add_state_updated_cb(self.on_state_updated)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _apply_move(self, row: int, col: int) -> None:
        try:
            self._game.apply_move(row, col)
        except InvalidMoveError as e:
            logger.info("Rejected move: %s", e)
            self._on_input_error(e)

    def _reset(self) -> None:
        self._game.reset()

    def _status_message(self) -> str:
        return status_message(self._game.status, self._game.current_player)

    def on_state_updated(self) -> None:
        if not self._running:
            return
        self._render_board()
        self._render_status(self._status_message())

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _render_status(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
