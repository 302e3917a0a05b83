"""
棋子与玩家定义

棋盘上的格子用整数编码: 0 表示空格，符号表示归属（白方为正、黑方为负），
绝对值表示等级（1: 兵, 2: 王）。棋子本身是不可变的值对象，升变时整体替换。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Position = Tuple[int, int]

BOARD_SIZE = 8

# 格子编码
EMPTY = 0
WHITE_MAN = 1
WHITE_KING = 2
BLACK_MAN = -1
BLACK_KING = -2

VALID_CELL_CODES = (EMPTY, WHITE_MAN, WHITE_KING, BLACK_MAN, BLACK_KING)

# 四个斜向方向，顺序即走法生成顺序
DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Player(Enum):
    """玩家枚举"""
    WHITE = 1
    BLACK = -1

    @property
    def opponent(self) -> 'Player':
        """对手"""
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def promotion_row(self) -> int:
        """升变行: 白方为第0行，黑方为第7行"""
        return 0 if self is Player.WHITE else BOARD_SIZE - 1

    @property
    def display_name(self) -> str:
        return "白方" if self is Player.WHITE else "黑方"


@dataclass(frozen=True)
class Piece:
    """
    棋子

    Attributes:
        owner: 所属玩家
        is_king: 是否为王
    """
    owner: Player
    is_king: bool = False

    def to_code(self) -> int:
        """转换为格子编码"""
        return self.owner.value * (2 if self.is_king else 1)

    @classmethod
    def from_code(cls, code: int) -> Optional['Piece']:
        """
        从格子编码创建棋子

        Args:
            code: 格子编码

        Returns:
            Optional[Piece]: 棋子，空格返回None
        """
        code = int(code)
        if code == EMPTY:
            return None
        if code not in VALID_CELL_CODES:
            raise ValueError(f"无效的格子编码: {code}")
        owner = Player.WHITE if code > 0 else Player.BLACK
        return cls(owner=owner, is_king=abs(code) == 2)

    def promoted(self) -> 'Piece':
        """返回升变后的棋子"""
        return Piece(owner=self.owner, is_king=True)

    @property
    def symbol(self) -> str:
        """文本棋盘中的符号: 白兵w 白王W 黑兵b 黑王B"""
        letter = 'w' if self.owner is Player.WHITE else 'b'
        return letter.upper() if self.is_king else letter


def in_bounds(pos: Position) -> bool:
    """检查坐标是否在棋盘范围内"""
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(pos: Position) -> bool:
    """深色格: 行列之和为奇数"""
    row, col = pos
    return (row + col) % 2 == 1
