from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from tic_tac_toe.exception import InvalidMoveError, LogicError

BOARD_SIZE: Final = 3
Marker: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = Marker | None

MARKERS: Final[tuple[Marker, Marker]] = ("X", "O")


def other_marker(marker: Marker) -> Marker:
    return "O" if marker == "X" else "X"


def _is_row(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable 3x3 grid, row-major.

    Any nested sequence is accepted and copied into tuples, so later changes to
    the caller's lists never reach the board. Wrong dimensions or cell values
    raise LogicError.
    """

    rows: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        rows = self.rows
        if not _is_row(rows) or len(rows) != BOARD_SIZE:
            msg = f"Board must be {BOARD_SIZE}x{BOARD_SIZE}."
            raise LogicError(msg)
        for row in rows:
            if not _is_row(row) or len(row) != BOARD_SIZE:
                msg = f"Board must be {BOARD_SIZE}x{BOARD_SIZE}."
                raise LogicError(msg)
            for cell in row:
                if cell is not None and cell not in MARKERS:
                    msg = f"Invalid cell value: {cell!r}"
                    raise LogicError(msg)
        object.__setattr__(self, "rows", tuple(tuple(row) for row in rows))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        return cls(rows)  # type: ignore[arg-type]

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, col = position
        return self.rows[row][col]

    def cell(self, row: int, col: int) -> Cell:
        return self.rows[row][col]

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in row) for row in self.rows)

    def available_positions(self) -> list[tuple[int, int]]:
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if self.rows[r][c] is None]

    def to_lists(self) -> list[list[Cell]]:
        return [list(row) for row in self.rows]


def empty_board() -> Board:
    return Board(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))


def _in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_move(board: Board, row: int, col: int) -> bool:
    """Check that (row, col) is on the board and empty. Out of range coordinates give False."""
    return _in_bounds(row, col) and board.rows[row][col] is None


def apply_move(board: Board, row: int, col: int, marker: Marker) -> Board:
    """Return a new board with marker placed at (row, col).

    Raises InvalidMoveError when the position is out of bounds or already taken.
    The given board is left as it was.
    """
    if not _in_bounds(row, col):
        raise InvalidMoveError(row, col, "Move out of bounds.")

    if board.rows[row][col] is not None:
        raise InvalidMoveError(row, col, "Cell occupied.")

    updated = board.to_lists()
    updated[row][col] = marker
    return Board(tuple(tuple(r) for r in updated))
