from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from tic_tac_toe.board import BOARD_SIZE, Board, Cell, Marker

Position: TypeAlias = tuple[int, int]
Line: TypeAlias = tuple[Position, ...]


def _build_lines() -> tuple[Line, ...]:
    size = range(BOARD_SIZE)
    lines: list[Line] = []
    lines.extend(tuple((r, c) for c in size) for r in size)  # Horizontal lines
    lines.extend(tuple((r, c) for r in size) for c in size)  # Vertical lines
    lines.append(tuple((i, i) for i in size))  # First diagonal
    lines.append(tuple((i, BOARD_SIZE - 1 - i) for i in size))  # Second diagonal
    return tuple(lines)


WINNING_LINES: Final[tuple[Line, ...]] = _build_lines()


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Won:
    winner: Marker


@dataclass(frozen=True, slots=True)
class Draw:
    pass


Status: TypeAlias = InProgress | Won | Draw

IN_PROGRESS: Final = InProgress()
DRAW: Final = Draw()


def check_line(cells: Sequence[Cell]) -> Marker | None:
    first = cells[0]
    if first is not None and all(cell == first for cell in cells[1:]):
        return first
    return None


def get_winner(board: Board) -> Marker | None:
    """Return the marker owning the first complete line, in WINNING_LINES order."""
    for line in WINNING_LINES:
        winner = check_line([board[position] for position in line])
        if winner is not None:
            return winner
    return None


def derive_status(board: Board) -> Status:
    """Compute the status of any board.

    The board does not need to come from alternating legal play. When both
    markers own a line, the first line found decides the winner.
    """
    winner = get_winner(board)
    if winner is not None:
        return Won(winner)
    if board.is_full():
        return DRAW
    return IN_PROGRESS


def is_game_over(status: Status) -> bool:
    return not isinstance(status, InProgress)
