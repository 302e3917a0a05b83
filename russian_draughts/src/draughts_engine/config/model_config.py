"""
配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator


@dataclass
class RulesConfig:
    """规则配置"""
    enforce_turn_owner: bool = True     # 只允许当前玩家的棋子行动
    enforce_chain_piece: bool = True    # 连续吃子期间只允许吃子的棋子继续行动


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = 'INFO'                 # 日志级别
    log_file: Optional[str] = None      # 日志文件名，None表示不写文件
    log_dir: str = 'logs/draughts_engine'  # 日志目录
    max_size: int = 10                  # 单个日志文件最大大小(MB)
    backup_count: int = 5               # 备份文件数量
    console_output: bool = True         # 是否输出到控制台


@dataclass
class DisplayConfig:
    """显示配置"""
    show_coordinates: bool = True       # 是否显示坐标
    highlight_moves: bool = True        # 是否列出可走目标格


class LoggingSettings(BaseModel):
    """日志配置验证模型"""
    level: str = Field(default='INFO', description="日志级别")
    log_file: Optional[str] = None
    log_dir: str = Field(default='logs/draughts_engine', min_length=1)
    max_size: int = Field(default=10, gt=0, description="单个日志文件最大大小(MB)")
    backup_count: int = Field(default=5, ge=0, description="备份文件数量")
    console_output: bool = True

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"无效的日志级别: {v}")
        return level


class RulesSettings(BaseModel):
    """规则配置验证模型"""
    enforce_turn_owner: bool = True
    enforce_chain_piece: bool = True


class DisplaySettings(BaseModel):
    """显示配置验证模型"""
    show_coordinates: bool = True
    highlight_moves: bool = True


# 默认配置实例
DEFAULT_RULES_CONFIG = RulesConfig()
DEFAULT_LOGGING_CONFIG = LoggingConfig()
DEFAULT_DISPLAY_CONFIG = DisplayConfig()
