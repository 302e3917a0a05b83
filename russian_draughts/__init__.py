"""
俄罗斯跳棋 (Russian Draughts)

8x8 俄罗斯跳棋规则引擎及命令行对局工具。
"""

__version__ = "0.1.0"
__author__ = "Russian Draughts Team"
__description__ = "俄罗斯跳棋规则引擎 - 有吃必吃、连续吃子与飞王"

from russian_draughts.src import draughts_engine

__all__ = [
    "draughts_engine",
    "__version__",
    "__author__",
    "__description__",
]
