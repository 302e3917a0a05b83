"""
跳棋走法数据结构

定义走法的表示和坐标记法转换。
"""

from dataclasses import dataclass
from typing import Tuple

from .piece import BOARD_SIZE, in_bounds


@dataclass(frozen=True)
class Move:
    """
    跳棋走法

    只记录起点和终点；连续吃子由多次走法组成。
    """
    from_pos: Tuple[int, int]  # 起始位置 (行, 列)
    to_pos: Tuple[int, int]    # 目标位置 (行, 列)

    def __post_init__(self):
        """初始化后验证数据有效性"""
        for pos in (self.from_pos, self.to_pos):
            if not in_bounds(pos):
                raise ValueError(f"无效的位置坐标: {pos}")

    @staticmethod
    def square_name(pos: Tuple[int, int]) -> str:
        """
        将坐标转换为格子名称

        列为 a-h，横排编号为 8 - 行号，白方位于棋盘下方。

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            str: 格子名称，如 (5, 2) -> "c3"
        """
        row, col = pos
        return f"{chr(ord('a') + col)}{BOARD_SIZE - row}"

    @staticmethod
    def parse_square(name: str) -> Tuple[int, int]:
        """
        将格子名称解析为坐标

        Args:
            name: 格子名称，如 "c3"

        Returns:
            Tuple[int, int]: 位置坐标
        """
        name = name.strip().lower()
        if len(name) != 2 or not name[1].isdigit():
            raise ValueError(f"无效的格子名称: {name}")

        col = ord(name[0]) - ord('a')
        row = BOARD_SIZE - int(name[1])
        if not in_bounds((row, col)):
            raise ValueError(f"无效的格子名称: {name}")
        return (row, col)

    def to_coordinate_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 坐标记法字符串，如 "c3d4"
        """
        return f"{self.square_name(self.from_pos)}{self.square_name(self.to_pos)}"

    @classmethod
    def from_coordinate_notation(cls, notation: str) -> 'Move':
        """
        从坐标记法创建Move对象

        接受 "c3d4"、"c3-d4" 和 "c3:e5" 三种写法。
        """
        cleaned = notation.strip().replace('-', '').replace(':', '').replace(' ', '')
        if len(cleaned) != 4:
            raise ValueError(f"无效的坐标记法: {notation}")

        return cls(
            from_pos=cls.parse_square(cleaned[:2]),
            to_pos=cls.parse_square(cleaned[2:])
        )

    def __str__(self) -> str:
        return self.to_coordinate_notation()
