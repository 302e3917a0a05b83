"""
俄罗斯跳棋规则引擎

8x8 棋盘、兵与飞王、有吃必吃、连续吃子。
包括棋局表示、吃子判定、走法生成、走法验证、胜负判定和对局会话。
"""

__version__ = "0.1.0"
__author__ = "Russian Draughts Team"

from .rules_engine import RuleEngine, DraughtsBoard, Move, MoveResult, MoveError, Player, Piece
from .config import ConfigManager, RulesConfig, LoggingConfig, DisplayConfig
from .game_interface import GameSession
from .utils import setup_logger, get_logger, DraughtsError

__all__ = [
    "__version__", "__author__",
    "RuleEngine", "DraughtsBoard", "Move", "MoveResult", "MoveError", "Player", "Piece",
    "ConfigManager", "RulesConfig", "LoggingConfig", "DisplayConfig",
    "GameSession",
    "setup_logger", "get_logger", "DraughtsError"
]
