"""
配置管理模块

包含规则配置、日志配置和显示配置。
"""

from .config_manager import ConfigManager
from .model_config import RulesConfig, LoggingConfig, DisplayConfig

__all__ = ['ConfigManager', 'RulesConfig', 'LoggingConfig', 'DisplayConfig']
