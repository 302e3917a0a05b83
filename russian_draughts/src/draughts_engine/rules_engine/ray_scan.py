"""
斜线扫描

王的吃子检测、王的走法生成和王的走法验证共用同一个扫描过程:
沿一个斜向方向向外逐格前进，直到棋盘边缘或遇到第二个棋子为止。
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .piece import Piece, Player, Position, in_bounds


@dataclass
class RayScan:
    """
    单条斜线的扫描结果

    Attributes:
        origin: 起点
        direction: 方向 (行增量, 列增量)
        empty_before: 第一个棋子之前的空格
        first_pos: 第一个棋子的位置
        first_piece: 第一个棋子
        landings_after: 第一个棋子之后、第二个棋子或边缘之前的空格
        second_pos: 第二个棋子的位置
        second_piece: 第二个棋子
    """
    origin: Position
    direction: Tuple[int, int]
    empty_before: List[Position] = field(default_factory=list)
    first_pos: Optional[Position] = None
    first_piece: Optional[Piece] = None
    landings_after: List[Position] = field(default_factory=list)
    second_pos: Optional[Position] = None
    second_piece: Optional[Piece] = None

    def capture_landings(self, owner: Player) -> List[Position]:
        """
        吃掉第一个棋子后可以落下的格子

        Args:
            owner: 行动方

        Returns:
            List[Position]: 落点列表；第一个棋子不是对方棋子时为空
        """
        if self.first_piece is None or self.first_piece.owner is owner:
            return []
        return list(self.landings_after)

    def can_capture(self, owner: Player) -> bool:
        """该方向上是否存在吃子机会"""
        return bool(self.capture_landings(owner))


def walk_ray(origin: Position, direction: Tuple[int, int]) -> Iterator[Position]:
    """依次产出从起点出发（不含起点）沿方向的所有棋盘内位置"""
    row, col = origin
    d_row, d_col = direction
    row, col = row + d_row, col + d_col
    while in_bounds((row, col)):
        yield (row, col)
        row, col = row + d_row, col + d_col


def scan_ray(board, origin: Position, direction: Tuple[int, int]) -> RayScan:
    """
    沿斜线扫描，收集格子直到被阻挡

    Args:
        board: 棋盘
        origin: 起点
        direction: 方向

    Returns:
        RayScan: 扫描结果
    """
    scan = RayScan(origin=origin, direction=direction)

    for pos in walk_ray(origin, direction):
        piece = board.get_piece_at(pos)

        if scan.first_piece is None:
            if piece is None:
                scan.empty_before.append(pos)
            else:
                scan.first_pos, scan.first_piece = pos, piece
            continue

        if piece is None:
            scan.landings_after.append(pos)
        else:
            scan.second_pos, scan.second_piece = pos, piece
            break

    return scan
