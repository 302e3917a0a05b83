"""
对局接口模块

提供与界面无关的对局会话管理。
"""

from .game_session import GameSession, GameState, GameResult

__all__ = ['GameSession', 'GameState', 'GameResult']
