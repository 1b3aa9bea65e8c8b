class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    def __init__(self, row: int, col: int, reason: str) -> None:
        super().__init__(f"Invalid move at ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason
