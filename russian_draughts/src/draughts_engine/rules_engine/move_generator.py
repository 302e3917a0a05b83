"""
走法生成

枚举单个棋子的合法目标格，或某一方全部的 (起点, 终点) 走法。
生成的都是单步走法；连续吃子由调用方在落点处继续调用完成。
"""

from typing import List, Optional

from .capture_resolver import CaptureResolver
from .draughts_board import DraughtsBoard
from .move import Move
from .piece import DIAGONALS, Player, Position, in_bounds
from .ray_scan import scan_ray
from ..config.model_config import RulesConfig


class MoveGenerator:
    """
    走法生成器

    与走法验证器遵循相同的"有吃必吃"规则:
    存在吃子机会时只提供吃子走法。
    """

    def __init__(self, capture_resolver: Optional[CaptureResolver] = None,
                 rules_config: Optional[RulesConfig] = None):
        self.capture_resolver = capture_resolver or CaptureResolver()
        self.rules_config = rules_config or RulesConfig()

    def get_moves_for_piece(self, board: DraughtsBoard, pos: Position) -> List[Position]:
        """
        生成指定位置棋子的所有目标格

        Args:
            board: 当前棋盘状态
            pos: 棋子位置

        Returns:
            List[Position]: 目标格列表，按方向顺序排列
        """
        piece = board.get_piece_at(pos)
        if piece is None:
            return []

        # 连续吃子期间，行动方只有吃子的那枚棋子可以走
        if (self.rules_config.enforce_chain_piece and board.chain_piece is not None
                and piece.owner is board.current_player and pos != board.chain_piece):
            return []

        must_capture = self.capture_resolver.can_capture(board, piece.owner)

        if piece.is_king:
            return self._generate_king_moves(board, pos, piece.owner, must_capture)
        return self._generate_man_moves(board, pos, piece.owner, must_capture)

    def _generate_man_moves(self, board: DraughtsBoard, pos: Position,
                            owner: Player, must_capture: bool) -> List[Position]:
        """生成兵的走法"""
        row, col = pos
        moves = []

        for d_row, d_col in DIAGONALS:
            step = (row + d_row, col + d_col)
            if not must_capture and board.is_empty(step):
                moves.append(step)

            # 跳吃不受有吃必吃限制
            jump = (row + 2 * d_row, col + 2 * d_col)
            if in_bounds(jump):
                middle = board.get_piece_at(step)
                if middle is not None and middle.owner is not owner and board.is_empty(jump):
                    moves.append(jump)

        return moves

    def _generate_king_moves(self, board: DraughtsBoard, pos: Position,
                             owner: Player, must_capture: bool) -> List[Position]:
        """生成王的走法: 吃子后同一斜线上的每个空格都是落点"""
        moves = []

        for direction in DIAGONALS:
            scan = scan_ray(board, pos, direction)
            if not must_capture:
                moves.extend(scan.empty_before)
            moves.extend(scan.capture_landings(owner))

        return moves

    def get_all_moves(self, board: DraughtsBoard, player: Player) -> List[Move]:
        """
        生成指定玩家的所有走法

        按行优先顺序（先行后列）遍历己方棋子，该顺序是确定的。

        Args:
            board: 当前棋盘状态
            player: 玩家

        Returns:
            List[Move]: 走法列表
        """
        moves = []
        for pos, _ in board.iter_pieces(player):
            for target in self.get_moves_for_piece(board, pos):
                moves.append(Move(from_pos=pos, to_pos=target))
        return moves

    def get_capture_moves(self, board: DraughtsBoard, player: Player) -> List[Move]:
        """只返回吃子走法（起终点之间跨过对方棋子）"""
        return [
            move for move in self.get_all_moves(board, player)
            if self.is_capture(board, move)
        ]

    @staticmethod
    def is_capture(board: DraughtsBoard, move: Move) -> bool:
        """判断走法路径上是否有对方棋子"""
        piece = board.get_piece_at(move.from_pos)
        if piece is None:
            return False

        (from_row, from_col), (to_row, to_col) = move.from_pos, move.to_pos
        distance = abs(to_row - from_row)
        if distance == 0 or distance != abs(to_col - from_col):
            return False

        d_row = (to_row - from_row) // distance
        d_col = (to_col - from_col) // distance
        for step in range(1, distance):
            between = board.get_piece_at((from_row + step * d_row, from_col + step * d_col))
            if between is not None and between.owner is not piece.owner:
                return True
        return False
