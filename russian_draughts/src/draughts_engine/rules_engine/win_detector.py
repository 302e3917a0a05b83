"""
胜负判定

扫描棋盘，一方没有任何棋子时另一方获胜。无子可走不视为失败。
"""

from typing import Optional, Tuple

from .draughts_board import DraughtsBoard
from .piece import Player


class WinDetector:
    """胜负判定器"""

    def check_win(self, board: DraughtsBoard) -> Tuple[bool, Optional[Player]]:
        """
        检查是否有获胜方

        Args:
            board: 当前棋盘状态

        Returns:
            Tuple[bool, Optional[Player]]: (是否分出胜负, 获胜方)
        """
        has_white = board.count_pieces(Player.WHITE) > 0
        has_black = board.count_pieces(Player.BLACK) > 0

        if not has_white:
            return True, Player.BLACK
        if not has_black:
            return True, Player.WHITE
        return False, None
