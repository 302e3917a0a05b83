"""
跳棋规则引擎模块

包含棋局表示、吃子判定、走法生成、走法验证和胜负判定等核心功能。
"""

from .piece import Player, Piece, Position, BOARD_SIZE
from .move import Move
from .draughts_board import DraughtsBoard
from .ray_scan import RayScan, scan_ray
from .capture_resolver import CaptureResolver
from .move_generator import MoveGenerator
from .move_validator import MoveValidator, MoveResult, MoveError
from .win_detector import WinDetector
from .board_validator import BoardValidator
from .rule_engine import RuleEngine

__all__ = [
    'Player', 'Piece', 'Position', 'BOARD_SIZE', 'Move', 'DraughtsBoard',
    'RayScan', 'scan_ray', 'CaptureResolver', 'MoveGenerator',
    'MoveValidator', 'MoveResult', 'MoveError', 'WinDetector',
    'BoardValidator', 'RuleEngine'
]
