"""
游戏会话

"先选子、再选目标格"的对局流程，与具体界面无关:
界面把点击或键盘输入转换为坐标后调用这里，再根据返回值重绘。
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..config.model_config import RulesConfig
from ..rules_engine import DraughtsBoard, MoveResult, Player, Position, RuleEngine
from ..rules_engine.piece import in_bounds


class GameState(Enum):
    """游戏状态枚举"""
    PLAYING = "playing"          # 对局进行中
    FINISHED = "finished"        # 已结束


class GameResult(Enum):
    """游戏结果枚举"""
    ONGOING = "ongoing"          # 进行中
    WHITE_WIN = "white_win"      # 白方胜
    BLACK_WIN = "black_win"      # 黑方胜


@dataclass
class GameSession:
    """游戏会话"""
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    rules_config: RulesConfig = field(default_factory=RulesConfig)
    board: Optional[DraughtsBoard] = None

    state: GameState = GameState.PLAYING
    result: GameResult = GameResult.ONGOING

    # 当前选中的棋子及其可走目标格
    selected: Optional[Position] = None
    highlighted: List[Position] = field(default_factory=list)

    def __post_init__(self):
        """初始化后处理"""
        self.logger = logging.getLogger(__name__)
        self.engine = RuleEngine(self.board, self.rules_config)
        self.board = self.engine.board

    @property
    def current_player(self) -> Player:
        return self.engine.current_player

    @property
    def is_finished(self) -> bool:
        return self.state is GameState.FINISHED

    @property
    def winner(self) -> Optional[Player]:
        """获胜方，未结束时为None"""
        if self.result is GameResult.WHITE_WIN:
            return Player.WHITE
        if self.result is GameResult.BLACK_WIN:
            return Player.BLACK
        return None

    def select(self, pos: Position) -> List[Position]:
        """
        选中一个棋子

        只能选中当前行动方的棋子；连续吃子期间（且规则要求时）只能选中吃子的那枚棋子。
        选择无效时清空当前选择。

        Args:
            pos: 棋子位置

        Returns:
            List[Position]: 可走的目标格
        """
        self.clear_selection()
        if self.is_finished or not in_bounds(pos):
            return []

        piece = self.engine.cell_at(*pos)
        if piece is None or piece.owner is not self.current_player:
            return []

        chain_piece = self.engine.chain_piece
        if (self.rules_config.enforce_chain_piece and chain_piece is not None
                and tuple(pos) != chain_piece):
            return []

        self.selected = tuple(pos)
        self.highlighted = self.engine.get_moves_for_piece(self.selected)
        return list(self.highlighted)

    def move_to(self, pos: Position) -> Optional[MoveResult]:
        """
        把选中的棋子走到目标格

        目标格不在可走列表中时不尝试执行，返回None。无论结果如何都会清空选择。

        Args:
            pos: 目标格

        Returns:
            Optional[MoveResult]: 执行结果
        """
        if self.selected is None or tuple(pos) not in self.highlighted:
            self.clear_selection()
            return None

        source = self.selected
        self.clear_selection()

        result = self.engine.try_move(source, tuple(pos))
        if result:
            self._update_result()
        return result

    def play(self, from_pos: Position, to_pos: Position) -> Optional[MoveResult]:
        """选子并走子"""
        self.select(from_pos)
        return self.move_to(to_pos)

    def clear_selection(self) -> None:
        self.selected = None
        self.highlighted = []

    def legal_moves(self):
        """当前行动方的全部走法"""
        if self.is_finished:
            return []
        return self.engine.get_all_moves(self.current_player)

    def _update_result(self) -> None:
        is_over, winner = self.engine.check_win()
        if not is_over:
            return

        self.state = GameState.FINISHED
        self.result = GameResult.WHITE_WIN if winner is Player.WHITE else GameResult.BLACK_WIN
        self.logger.info(f"会话 {self.session_id} 结束: {self.result.value}")
