"""
跳棋棋盘数据结构

只负责棋局状态的存储与读取（格子内容、当前玩家），不包含任何规则知识。
"""

import copy
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .piece import (
    BOARD_SIZE, EMPTY, VALID_CELL_CODES, Piece, Player, Position,
    in_bounds, is_dark_square
)
from ..utils.exceptions import GameStateError, InvalidPositionError


class DraughtsBoard:
    """
    俄罗斯跳棋棋盘

    8x8 的整数矩阵，0 表示空格。黑方占据前三行，白方占据后三行，白方先走。
    """

    def __init__(self, setup: bool = True):
        """
        初始化棋盘

        Args:
            setup: 是否摆放初始局面，False 时创建空棋盘
        """
        self.board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

        # 当前轮到的玩家
        self.current_player = Player.WHITE

        # 连续吃子中必须继续行动的棋子位置
        self.chain_piece: Optional[Position] = None

        if setup:
            self._setup_initial_position()

    def _setup_initial_position(self):
        """摆放初始局面: 只使用深色格"""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if not is_dark_square((row, col)):
                    continue
                if row < BOARD_SIZE // 2 - 1:
                    self.board[row, col] = Piece(Player.BLACK).to_code()
                elif row >= BOARD_SIZE // 2 + 1:
                    self.board[row, col] = Piece(Player.WHITE).to_code()

    @classmethod
    def empty(cls, current_player: Player = Player.WHITE) -> 'DraughtsBoard':
        """创建空棋盘"""
        board = cls(setup=False)
        board.current_player = current_player
        return board

    @classmethod
    def from_matrix(cls, matrix, current_player: Player = Player.WHITE) -> 'DraughtsBoard':
        """
        从矩阵创建棋盘对象

        Args:
            matrix: 8x8 的格子编码矩阵
            current_player: 当前玩家

        Returns:
            DraughtsBoard: 棋盘对象
        """
        data = np.asarray(matrix)
        if data.shape != (BOARD_SIZE, BOARD_SIZE):
            raise GameStateError(f"矩阵尺寸 {data.shape}", f"应为 {BOARD_SIZE}x{BOARD_SIZE}")

        invalid = set(np.unique(data).tolist()) - set(VALID_CELL_CODES)
        if invalid:
            raise GameStateError("矩阵包含无效的格子编码", str(sorted(invalid)))

        board = cls(setup=False)
        board.board = data.astype(np.int8)
        board.current_player = current_player
        return board

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: 8x8 的格子编码矩阵副本
        """
        return self.board.copy()

    def get_piece_at(self, pos: Position) -> Optional[Piece]:
        """
        获取指定位置的棋子

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            Optional[Piece]: 棋子，空格或越界返回None
        """
        if not in_bounds(pos):
            return None
        return Piece.from_code(self.board[pos[0], pos[1]])

    def set_piece_at(self, pos: Position, piece: Optional[Piece]) -> None:
        """
        设置指定位置的棋子

        Args:
            pos: 位置坐标
            piece: 棋子，None 表示清空
        """
        if not in_bounds(pos):
            raise InvalidPositionError(pos, "超出棋盘范围")
        self.board[pos[0], pos[1]] = EMPTY if piece is None else piece.to_code()

    def is_empty(self, pos: Position) -> bool:
        """检查指定位置是否为空（越界视为非空）"""
        return in_bounds(pos) and self.board[pos[0], pos[1]] == EMPTY

    def switch_player(self) -> None:
        """切换当前玩家"""
        self.current_player = self.current_player.opponent

    def iter_pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Piece]]:
        """
        按行优先顺序遍历棋子

        Args:
            player: 指定玩家，None表示所有棋子
        """
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                code = self.board[row, col]
                if code == EMPTY:
                    continue
                piece = Piece.from_code(code)
                if player is None or piece.owner is player:
                    yield (row, col), piece

    def get_all_pieces(self, player: Optional[Player] = None) -> List[Tuple[Position, Piece]]:
        """获取所有棋子的位置和类型"""
        return list(self.iter_pieces(player))

    def count_pieces(self, player: Optional[Player] = None) -> int:
        """统计棋子数量"""
        if player is None:
            return int(np.count_nonzero(self.board))
        if player is Player.WHITE:
            return int(np.count_nonzero(self.board > 0))
        return int(np.count_nonzero(self.board < 0))

    def piece_counts(self) -> Dict[str, int]:
        """
        统计双方兵和王的数量

        Returns:
            Dict[str, int]: 如 {'white_men': 12, 'white_kings': 0, ...}
        """
        counts = {'white_men': 0, 'white_kings': 0, 'black_men': 0, 'black_kings': 0}
        for _, piece in self.iter_pieces():
            color = 'white' if piece.owner is Player.WHITE else 'black'
            rank = 'kings' if piece.is_king else 'men'
            counts[f'{color}_{rank}'] += 1
        return counts

    def copy(self) -> 'DraughtsBoard':
        """
        创建棋盘的深拷贝

        Returns:
            DraughtsBoard: 棋盘副本
        """
        return copy.deepcopy(self)

    def to_visual_string(self, show_coordinates: bool = True) -> str:
        """
        转换为可视化字符串

        Returns:
            str: 可视化的棋盘字符串
        """
        lines = []
        header = "   a b c d e f g h"
        if show_coordinates:
            lines.append(header)

        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                piece = self.get_piece_at((row, col))
                if piece is not None:
                    cells.append(piece.symbol)
                else:
                    cells.append('.' if is_dark_square((row, col)) else ' ')
            line = " ".join(cells)
            if show_coordinates:
                rank = BOARD_SIZE - row
                line = f"{rank}  {line}  {rank}"
            lines.append(line)

        if show_coordinates:
            lines.append(header)
        lines.append(f"当前玩家: {self.current_player.display_name}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, DraughtsBoard):
            return False
        return (np.array_equal(self.board, other.board) and
                self.current_player == other.current_player and
                self.chain_piece == other.chain_piece)

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.current_player, self.chain_piece))
