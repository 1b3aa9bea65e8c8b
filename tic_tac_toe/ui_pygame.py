from typing import Final

import pygame

from tic_tac_toe.board import BOARD_SIZE
from tic_tac_toe.game import TicTacToe
from tic_tac_toe.rules import is_game_over
from tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    BOARD_PIXELS: Final = 480
    STATUS_HEIGHT: Final = 64
    CELL_SIZE: Final = BOARD_PIXELS // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    STATUS_BG_COLOR: Final = (31, 31, 63)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game: TicTacToe) -> None:
        super().__init__(game)
        self._cells = self._game.board.to_lists()
        self._status_text = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.BOARD_PIXELS, self.BOARD_PIXELS + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 40)
        self._hint_font = pygame.font.SysFont(None, 24)

        super().run()
        self.on_state_updated()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_r:
                    self._reset()
                case pygame.MOUSEBUTTONDOWN:
                    if is_game_over(self._game.status):
                        self._reset()
                    else:
                        self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not self._game.is_cell_enabled(row, col):
            return
        self._apply_move(row, col)

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        pygame.display.flip()

    def _render_board(self) -> None:
        self._cells = self._game.board.to_lists()

    def _render_status(self, message: str) -> None:
        self._status_text = message
        pygame.display.set_caption(f"{self.TITLE} - {message}")

    def _on_input_error(self, _exception: Exception) -> None:
        pass

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.BOARD_PIXELS, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.BOARD_PIXELS),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                value = self._cells[row][col]
                if value is None:
                    continue
                text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
                rect = text.get_rect(
                    center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
                )
                self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        strip = pygame.Rect(0, self.BOARD_PIXELS, self.BOARD_PIXELS, self.STATUS_HEIGHT)
        pygame.draw.rect(self._screen, self.STATUS_BG_COLOR, strip)
        status_text = self._small_font.render(self._status_text, True, self.TEXT_COLOR)  # noqa: FBT003
        status_rect = status_text.get_rect(center=(self.BOARD_PIXELS // 2, self.BOARD_PIXELS + 22))
        self._screen.blit(status_text, status_rect)
        hint = "Click anywhere for a new game" if is_game_over(self._game.status) else "Press R for a new game"
        hint_text = self._hint_font.render(hint, True, self.TEXT_COLOR)  # noqa: FBT003
        hint_rect = hint_text.get_rect(center=(self.BOARD_PIXELS // 2, self.BOARD_PIXELS + 48))
        self._screen.blit(hint_text, hint_rect)
