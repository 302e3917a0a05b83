"""
走法验证

判断一个 (起点, 终点) 走法在有吃必吃规则下是否合法，合法则立即执行。
非法走法不抛异常，返回带拒绝原因的 ``MoveResult``，棋盘保持不变。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .capture_resolver import CaptureResolver
from .draughts_board import DraughtsBoard
from .piece import Piece, Position, in_bounds
from .ray_scan import scan_ray
from ..config.model_config import RulesConfig
from ..utils.logger import LoggerMixin


class MoveError(Enum):
    """走法被拒绝的原因"""
    OUT_OF_BOUNDS = "out_of_bounds"
    NO_PIECE_AT_SOURCE = "no_piece_at_source"
    WRONG_OWNER = "wrong_owner"
    CHAIN_PIECE_REQUIRED = "chain_piece_required"
    NON_DIAGONAL_MOVE = "non_diagonal_move"
    INVALID_GEOMETRY = "invalid_geometry"
    TARGET_OCCUPIED = "target_occupied"
    NON_CAPTURING_WHILE_CAPTURE_MANDATORY = "non_capturing_while_capture_mandatory"
    INVALID_MIDPOINT = "invalid_midpoint"
    PATH_BLOCKED_BY_OWN_PIECE = "path_blocked_by_own_piece"
    MULTIPLE_INTERVENING_PIECES = "multiple_intervening_pieces"


@dataclass(frozen=True)
class MoveResult:
    """
    走法执行结果

    布尔值等价于走法是否已执行。

    Attributes:
        success: 是否已执行
        error: 拒绝原因
        captured: 被吃棋子的位置
        promoted: 本步是否升变为王
        continues_capture: 同一棋子是否必须继续吃子（未交换行动方）
    """
    success: bool
    error: Optional[MoveError] = None
    captured: Optional[Position] = None
    promoted: bool = False
    continues_capture: bool = False

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def rejected(cls, error: MoveError) -> 'MoveResult':
        return cls(success=False, error=error)


class MoveValidator(LoggerMixin):
    """
    走法验证器

    先完成全部检查再修改棋盘，因此任何失败都不会改变格子或当前玩家。
    """

    def __init__(self, capture_resolver: Optional[CaptureResolver] = None,
                 rules_config: Optional[RulesConfig] = None):
        self.capture_resolver = capture_resolver or CaptureResolver()
        self.rules_config = rules_config or RulesConfig()

    def try_move(self, board: DraughtsBoard, from_pos: Position, to_pos: Position) -> MoveResult:
        """
        尝试执行走法

        Args:
            board: 当前棋盘状态
            from_pos: 起点
            to_pos: 终点

        Returns:
            MoveResult: 执行结果
        """
        from_pos, to_pos = tuple(from_pos), tuple(to_pos)
        result = self._try_move(board, from_pos, to_pos)
        if result:
            self.log_debug(f"走法已执行: {from_pos} -> {to_pos}, 吃子: {result.captured}, "
                           f"继续吃子: {result.continues_capture}")
            if result.promoted:
                owner = board.get_piece_at(to_pos).owner
                self.log_info(f"{owner.display_name}的兵在 {to_pos} 升变为王")
        else:
            self.log_debug(f"走法被拒绝: {from_pos} -> {to_pos}, 原因: {result.error.value}")
        return result

    def check_move(self, board: DraughtsBoard, from_pos: Position, to_pos: Position) -> Optional[MoveError]:
        """
        只检查不执行

        Returns:
            Optional[MoveError]: 合法返回None，否则返回拒绝原因
        """
        return self._try_move(board.copy(), tuple(from_pos), tuple(to_pos)).error

    def _try_move(self, board: DraughtsBoard, from_pos: Position, to_pos: Position) -> MoveResult:
        if not in_bounds(from_pos) or not in_bounds(to_pos):
            return MoveResult.rejected(MoveError.OUT_OF_BOUNDS)

        piece = board.get_piece_at(from_pos)
        if piece is None:
            return MoveResult.rejected(MoveError.NO_PIECE_AT_SOURCE)

        if self.rules_config.enforce_turn_owner and piece.owner is not board.current_player:
            return MoveResult.rejected(MoveError.WRONG_OWNER)

        if (self.rules_config.enforce_chain_piece and board.chain_piece is not None
                and from_pos != board.chain_piece):
            return MoveResult.rejected(MoveError.CHAIN_PIECE_REQUIRED)

        d_row = to_pos[0] - from_pos[0]
        d_col = to_pos[1] - from_pos[1]
        if abs(d_row) != abs(d_col):
            return MoveResult.rejected(MoveError.NON_DIAGONAL_MOVE)
        if d_row == 0:
            return MoveResult.rejected(MoveError.INVALID_GEOMETRY)

        must_capture = self.capture_resolver.can_capture(board, piece.owner)

        if piece.is_king:
            return self._try_king_move(board, piece, from_pos, to_pos, must_capture)
        return self._try_man_move(board, piece, from_pos, to_pos, must_capture)

    def _try_man_move(self, board: DraughtsBoard, piece: Piece, from_pos: Position,
                      to_pos: Position, must_capture: bool) -> MoveResult:
        """兵: 单步斜走或隔一个对方棋子跳吃"""
        distance = abs(to_pos[0] - from_pos[0])
        if distance not in (1, 2):
            return MoveResult.rejected(MoveError.INVALID_GEOMETRY)

        if not board.is_empty(to_pos):
            return MoveResult.rejected(MoveError.TARGET_OCCUPIED)

        if distance == 1:
            if must_capture:
                return MoveResult.rejected(MoveError.NON_CAPTURING_WHILE_CAPTURE_MANDATORY)

            self._relocate(board, piece, from_pos, to_pos)
            return self._finish_turn(board, to_pos, captured=None)

        middle_pos = ((from_pos[0] + to_pos[0]) // 2, (from_pos[1] + to_pos[1]) // 2)
        middle = board.get_piece_at(middle_pos)
        if middle is None or middle.owner is piece.owner:
            return MoveResult.rejected(MoveError.INVALID_MIDPOINT)

        self._relocate(board, piece, from_pos, to_pos)
        board.set_piece_at(middle_pos, None)

        # 可以继续吃子时不升变、不交换行动方
        if self.capture_resolver.can_man_capture(board, to_pos):
            return self._continue_chain(board, to_pos, middle_pos)
        return self._finish_turn(board, to_pos, captured=middle_pos)

    def _try_king_move(self, board: DraughtsBoard, piece: Piece, from_pos: Position,
                       to_pos: Position, must_capture: bool) -> MoveResult:
        """王: 沿斜线任意距离，路径上至多一个对方棋子"""
        distance = abs(to_pos[0] - from_pos[0])
        direction = ((to_pos[0] - from_pos[0]) // distance, (to_pos[1] - from_pos[1]) // distance)
        scan = scan_ray(board, from_pos, direction)

        captured = None
        if to_pos in scan.empty_before:
            pass
        elif to_pos == scan.first_pos:
            return MoveResult.rejected(MoveError.TARGET_OCCUPIED)
        elif scan.first_piece.owner is piece.owner:
            return MoveResult.rejected(MoveError.PATH_BLOCKED_BY_OWN_PIECE)
        elif to_pos in scan.landings_after:
            captured = scan.first_pos
        elif to_pos == scan.second_pos:
            return MoveResult.rejected(MoveError.TARGET_OCCUPIED)
        elif scan.second_piece.owner is piece.owner:
            return MoveResult.rejected(MoveError.PATH_BLOCKED_BY_OWN_PIECE)
        else:
            return MoveResult.rejected(MoveError.MULTIPLE_INTERVENING_PIECES)

        if must_capture and captured is None:
            return MoveResult.rejected(MoveError.NON_CAPTURING_WHILE_CAPTURE_MANDATORY)

        self._relocate(board, piece, from_pos, to_pos)
        if captured is not None:
            board.set_piece_at(captured, None)
            if self.capture_resolver.can_king_capture(board, to_pos):
                return self._continue_chain(board, to_pos, captured)

        return self._finish_turn(board, to_pos, captured=captured)

    @staticmethod
    def _relocate(board: DraughtsBoard, piece: Piece, from_pos: Position, to_pos: Position):
        board.set_piece_at(to_pos, piece)
        board.set_piece_at(from_pos, None)

    def _continue_chain(self, board: DraughtsBoard, pos: Position, captured: Position) -> MoveResult:
        board.chain_piece = pos
        return MoveResult(success=True, captured=captured, continues_capture=True)

    def _finish_turn(self, board: DraughtsBoard, pos: Position,
                     captured: Optional[Position]) -> MoveResult:
        """检查升变并交换行动方"""
        promoted = self._promote_if_needed(board, pos)
        board.chain_piece = None
        board.switch_player()
        return MoveResult(success=True, captured=captured, promoted=promoted)

    def _promote_if_needed(self, board: DraughtsBoard, pos: Position) -> bool:
        """兵到达对方底线时整体替换为王"""
        piece = board.get_piece_at(pos)
        if piece.is_king or pos[0] != piece.owner.promotion_row:
            return False

        board.set_piece_at(pos, piece.promoted())
        return True
