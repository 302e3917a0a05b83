"""
跳棋规则引擎

持有一个棋盘，对外提供查询与执行接口。界面层只通过这里与规则交互:
读取格子、查询合法走法和吃子状态、提交走法、检查胜负。
"""

from typing import Dict, List, Optional, Tuple

from .capture_resolver import CaptureResolver
from .draughts_board import DraughtsBoard
from .move import Move
from .move_generator import MoveGenerator
from .move_validator import MoveResult, MoveValidator
from .piece import Piece, Player, Position
from .win_detector import WinDetector
from ..config.model_config import RulesConfig
from ..utils.exceptions import InvalidMoveError
from ..utils.logger import LoggerMixin


class RuleEngine(LoggerMixin):
    """
    跳棋规则引擎

    棋盘在对局期间原地修改，不做快照；同一棋盘不能被多个线程同时使用。
    """

    def __init__(self, board: Optional[DraughtsBoard] = None,
                 rules_config: Optional[RulesConfig] = None):
        """
        初始化规则引擎

        Args:
            board: 棋盘，None 表示使用初始局面
            rules_config: 规则配置
        """
        self.board = board if board is not None else DraughtsBoard()
        self.rules_config = rules_config or RulesConfig()

        self.capture_resolver = CaptureResolver()
        self.move_generator = MoveGenerator(self.capture_resolver, self.rules_config)
        self.move_validator = MoveValidator(self.capture_resolver, self.rules_config)
        self.win_detector = WinDetector()

    # ==================== 查询接口 ====================

    def cell_at(self, row: int, col: int) -> Optional[Piece]:
        """获取格子中的棋子，空格返回None"""
        return self.board.get_piece_at((row, col))

    @property
    def current_player(self) -> Player:
        """当前行动方"""
        return self.board.current_player

    @property
    def chain_piece(self) -> Optional[Position]:
        """连续吃子中必须继续行动的棋子位置"""
        return self.board.chain_piece

    def get_moves_for_piece(self, pos: Position) -> List[Position]:
        """获取指定棋子的合法目标格"""
        return self.move_generator.get_moves_for_piece(self.board, tuple(pos))

    def get_all_moves(self, player: Optional[Player] = None) -> List[Move]:
        """
        获取指定玩家的全部走法

        Args:
            player: 玩家，None表示当前玩家

        Returns:
            List[Move]: 行优先顺序的走法列表
        """
        if player is None:
            player = self.board.current_player
        return self.move_generator.get_all_moves(self.board, player)

    def can_capture(self, player: Optional[Player] = None) -> bool:
        """检查玩家是否必须吃子"""
        if player is None:
            player = self.board.current_player
        return self.capture_resolver.can_capture(self.board, player)

    def check_win(self) -> Tuple[bool, Optional[Player]]:
        """检查胜负"""
        return self.win_detector.check_win(self.board)

    def piece_counts(self) -> Dict[str, int]:
        """双方兵和王的数量"""
        return self.board.piece_counts()

    # ==================== 执行接口 ====================

    def try_move(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """
        尝试执行走法

        Returns:
            MoveResult: 执行结果，失败时棋盘不变
        """
        result = self.move_validator.try_move(self.board, from_pos, to_pos)
        if result:
            is_over, winner = self.check_win()
            if is_over:
                self.log_info(f"对局结束，{winner.display_name}获胜")
        return result

    def apply_move(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """
        执行走法，非法时抛出异常

        Raises:
            InvalidMoveError: 走法被拒绝
        """
        result = self.try_move(from_pos, to_pos)
        if not result:
            raise InvalidMoveError(f"{tuple(from_pos)} -> {tuple(to_pos)}", result.error)
        return result

    def apply_notation(self, notation: str) -> MoveResult:
        """按坐标记法执行走法，如 "c3d4" """
        move = Move.from_coordinate_notation(notation)
        return self.apply_move(move.from_pos, move.to_pos)
