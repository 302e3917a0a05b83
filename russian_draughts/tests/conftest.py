"""
测试公共夹具
"""

import pytest

from russian_draughts.src.draughts_engine.rules_engine import DraughtsBoard, Player


@pytest.fixture
def make_board():
    """
    局面工厂

    用法: make_board({(2, 1): Piece(Player.WHITE)}, Player.BLACK)
    """
    def _build(pieces, current_player=Player.WHITE):
        board = DraughtsBoard.empty(current_player)
        for pos, piece in pieces.items():
            board.set_piece_at(pos, piece)
        return board

    return _build
