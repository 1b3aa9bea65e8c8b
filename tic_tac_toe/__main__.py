import argparse
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Final

from tic_tac_toe.board import MARKERS
from tic_tac_toe.game import TicTacToe

if TYPE_CHECKING:
    from tic_tac_toe.ui import Ui

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
UI_CHOICES: Final = ("terminal", "pygame", "tk")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(UI_CHOICES, argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    game = TicTacToe(first_player=args.first_player)
    ui = _load_ui(args.ui)(game)
    ui.run()


def _load_ui(name: str) -> "type[Ui]":
    # tkinter and pygame are imported only for the chosen front end.
    match name:
        case "terminal":
            from tic_tac_toe.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi
        case "pygame":
            from tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi
        case "tk":
            from tic_tac_toe.ui_tk import TkUi  # noqa: PLC0415

            return TkUi
        case _:
            msg = f"Unknown UI: {name}"
            raise ValueError(msg)


def _parse_args(ui_choices: Iterable[str], argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic_tac_toe", description="Two player tic-tac-toe on one screen.")

    parser.add_argument("--ui", choices=tuple(ui_choices), required=True)
    parser.add_argument("--first-player", choices=MARKERS, default="X")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        type=str.upper,
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
