"""
吃子判定

判断某一方是否存在可吃的子。这是"有吃必吃"规则的唯一来源，
走法验证和走法生成都依赖它。
"""

from typing import List

from .draughts_board import DraughtsBoard
from .piece import DIAGONALS, Player, Position, in_bounds
from .ray_scan import scan_ray


class CaptureResolver:
    """吃子判定器"""

    def can_capture(self, board: DraughtsBoard, player: Player) -> bool:
        """
        检查玩家是否有任何可吃的子

        Args:
            board: 当前棋盘状态
            player: 玩家

        Returns:
            bool: 是否存在吃子机会
        """
        for pos, _ in board.iter_pieces(player):
            if self.can_piece_capture(board, pos):
                return True
        return False

    def can_piece_capture(self, board: DraughtsBoard, pos: Position) -> bool:
        """检查指定位置的棋子能否吃子"""
        piece = board.get_piece_at(pos)
        if piece is None:
            return False
        if piece.is_king:
            return self.can_king_capture(board, pos)
        return self.can_man_capture(board, pos)

    def can_man_capture(self, board: DraughtsBoard, pos: Position) -> bool:
        """兵的吃子检测: 四个方向上相邻对方棋子后面是空格"""
        return bool(self.man_capture_landings(board, pos))

    def man_capture_landings(self, board: DraughtsBoard, pos: Position) -> List[Position]:
        """
        兵的跳吃落点

        Args:
            board: 当前棋盘状态
            pos: 兵的位置

        Returns:
            List[Position]: 按方向顺序排列的落点
        """
        piece = board.get_piece_at(pos)
        if piece is None or piece.is_king:
            return []

        row, col = pos
        landings = []
        for d_row, d_col in DIAGONALS:
            target = (row + 2 * d_row, col + 2 * d_col)
            if not in_bounds(target):
                continue

            middle = board.get_piece_at((row + d_row, col + d_col))
            if middle is not None and middle.owner is not piece.owner and board.is_empty(target):
                landings.append(target)
        return landings

    def can_king_capture(self, board: DraughtsBoard, pos: Position) -> bool:
        """王的吃子检测: 某条斜线上恰好一个对方棋子，其后至少一个空格"""
        piece = board.get_piece_at(pos)
        if piece is None or not piece.is_king:
            return False

        return any(
            scan_ray(board, pos, direction).can_capture(piece.owner)
            for direction in DIAGONALS
        )
