import pytest
from tic_tac_toe.board import Board, apply_move, empty_board, is_valid_move
from tic_tac_toe.exception import LogicError
from tic_tac_toe.rules import derive_status

def test_probe_direct_ctor():
    with pytest.raises(LogicError):
        Board(((None,)*3,))

def test_probe_all_coords():
    b = Board.from_rows([["X",None,"O"],[None]*3,["O","X",None]])
    for r in range(-2,5):
        for c in range(-2,5):
            exp = 0<=r<3 and 0<=c<3 and b[r,c] is None if (0<=r<3 and 0<=c<3) else False
            assert is_valid_move(b,r,c) == exp
