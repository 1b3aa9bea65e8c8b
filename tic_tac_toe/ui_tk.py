import tkinter as tk
from functools import partial
from typing import Final

from tic_tac_toe.board import BOARD_SIZE
from tic_tac_toe.game import TicTacToe
from tic_tac_toe.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"
    FONT: Final = ("Helvetica", 32)
    STATUS_FONT: Final = ("Helvetica", 16, "bold")
    X_COLOR: Final = "#bf3f3f"
    O_COLOR: Final = "#3f3fbf"

    def __init__(self, game: TicTacToe) -> None:
        super().__init__(game)
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._status_label = tk.Label(self._root, text="", font=self.STATUS_FONT)
        self._status_label.grid(row=0, column=0, columnspan=BOARD_SIZE, pady=4)
        self._build_grid()
        reset_button = tk.Button(self._root, text="New Game", command=self._reset)
        reset_button.grid(row=BOARD_SIZE + 1, column=0, columnspan=BOARD_SIZE, sticky="ew", padx=2, pady=4)
        super().run()
        self.on_state_updated()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    def _build_grid(self) -> None:
        total_buttons = BOARD_SIZE * BOARD_SIZE
        for i in range(total_buttons):
            btn = tk.Button(
                self._root,
                text="",
                width=3,
                height=1,
                font=self.FONT,
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row + 1, column=col, padx=2, pady=2)
            self._buttons.append(btn)

    def _on_click(self, index: int) -> None:
        if not self._running:
            return
        row, col = divmod(index, BOARD_SIZE)
        self._apply_move(row, col)

    def _render_board(self) -> None:
        for i, btn in enumerate(self._buttons):
            row, col = divmod(i, BOARD_SIZE)
            value = self._game.board.cell(row, col)
            btn.config(
                text=value if value is not None else "",
                fg=self.X_COLOR if value == "X" else self.O_COLOR,
                state=tk.NORMAL if self._game.is_cell_enabled(row, col) else tk.DISABLED,
            )

    def _render_status(self, message: str) -> None:
        self._status_label.config(text=message)
        self._root.title(f"{self.TITLE} - {message}")

    def _on_input_error(self, _exception: Exception) -> None:
        pass
