# ruff: noqa: T201

from typing import Final

from tic_tac_toe.board import BOARD_SIZE
from tic_tac_toe.rules import is_game_over
from tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    EXIT_COMMAND: Final = "exit"
    RESET_COMMAND: Final = "new"

    def run(self) -> None:
        super().run()
        self.on_state_updated()
        self._prompt()
        while self._running:
            try:
                input_str = input()
            except (KeyboardInterrupt, EOFError):
                self._stop()
                break
            self._handle_input(input_str)
            if self._running:
                self._prompt()
        print("Terminal UI stopped", flush=True)

    def _prompt(self) -> None:
        max_move = BOARD_SIZE * BOARD_SIZE
        if is_game_over(self._game.status):
            print(f"Type '{self.RESET_COMMAND}' to play again or '{self.EXIT_COMMAND}' to quit: ", end="", flush=True)
        else:
            print(f"Player {self._game.current_player}'s move (1-{max_move}): ", end="", flush=True)

    def _handle_input(self, input_str: str) -> None:
        command = input_str.strip().lower()
        if command == self.EXIT_COMMAND:
            self._stop()
            return
        if command == self.RESET_COMMAND:
            self._reset()
            return

        try:
            board_position = int(command)
        except ValueError:
            self._on_input_error(ValueError("Not an integer"))
            return

        max_move = BOARD_SIZE * BOARD_SIZE
        if not (1 <= board_position <= max_move):
            self._on_input_error(ValueError(f"Not between 1 and {max_move}"))
            return

        row, col = divmod(board_position - 1, BOARD_SIZE)
        self._apply_move(row, col)

    def _render_board(self) -> None:
        board = self._game.board

        def _cell_value(index: int) -> str:
            row, col = divmod(index, BOARD_SIZE)
            value = board.cell(row, col)
            return value if value is not None else str(index + 1)

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _render_status(self, message: str) -> None:
        print(message, flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
