"""
配置管理器

负责加载、保存和管理各种配置。
"""

import json
import logging
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import ValidationError

from .model_config import (
    RulesConfig, LoggingConfig, DisplayConfig,
    RulesSettings, LoggingSettings, DisplaySettings,
    DEFAULT_RULES_CONFIG, DEFAULT_LOGGING_CONFIG, DEFAULT_DISPLAY_CONFIG
)
from ..utils.exceptions import ConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    配置管理器

    每类配置对应配置目录中的一个 YAML 文件，首次使用时写入默认值。
    """

    def __init__(self, config_dir: str = "russian_draughts/configs"):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
        """
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_files = {
            'rules': self.config_dir / 'rules_config.yaml',
            'logging': self.config_dir / 'logging_config.yaml',
            'display': self.config_dir / 'display_config.yaml'
        }

        self.default_configs = {
            'rules': DEFAULT_RULES_CONFIG,
            'logging': DEFAULT_LOGGING_CONFIG,
            'display': DEFAULT_DISPLAY_CONFIG
        }

        self.config_types = {
            'rules': RulesConfig,
            'logging': LoggingConfig,
            'display': DisplayConfig
        }

        # 用于校验的 pydantic 模型
        self.validators = {
            'rules': RulesSettings,
            'logging': LoggingSettings,
            'display': DisplaySettings
        }

        self._initialize_default_configs()

    def _initialize_default_configs(self):
        """初始化默认配置文件"""
        for config_name, config_obj in self.default_configs.items():
            config_file = self.config_files[config_name]
            if not config_file.exists():
                self.save_config(config_name, config_obj)
                logger.info(f"创建默认配置文件: {config_file}")

    def _default(self, config_name: str):
        """返回默认配置的副本"""
        return replace(self.default_configs[config_name])

    def load_config(self, config_name: str, config_class: Type[T]) -> T:
        """
        加载配置

        文件不存在或无法解析时回退到默认配置。

        Args:
            config_name: 配置名称
            config_class: 配置类

        Returns:
            配置对象
        """
        if config_name not in self.config_files:
            raise ConfigurationError(config_name, "未知的配置名称")

        config_file = self.config_files[config_name]
        if not config_file.exists():
            logger.warning(f"配置文件不存在: {config_file}，使用默认配置")
            return self._default(config_name)

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix == '.yaml':
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)

            validated = self.validators[config_name](**self._filter_fields(data, config_class))
            config = config_class(**validated.model_dump())
            logger.debug(f"成功加载配置: {config_file}")
            return config

        except (OSError, yaml.YAMLError, json.JSONDecodeError, ValidationError,
                TypeError, AttributeError) as e:
            logger.error(f"加载配置文件失败: {config_file}, 错误: {e}")
            return self._default(config_name)

    def save_config(self, config_name: str, config_obj: Any):
        """
        保存配置

        Args:
            config_name: 配置名称
            config_obj: 配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file:
            raise ConfigurationError(config_name, "未知的配置名称")

        data = asdict(config_obj)
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

        logger.debug(f"成功保存配置: {config_file}")

    def get_rules_config(self) -> RulesConfig:
        """获取规则配置"""
        return self.load_config('rules', RulesConfig)

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置"""
        return self.load_config('logging', LoggingConfig)

    def get_display_config(self) -> DisplayConfig:
        """获取显示配置"""
        return self.load_config('display', DisplayConfig)

    def update_config(self, config_name: str, **kwargs):
        """
        更新配置

        Args:
            config_name: 配置名称
            **kwargs: 要更新的配置项
        """
        config_class = self.config_types.get(config_name)
        if config_class is None:
            raise ConfigurationError(config_name, "未知的配置名称")
        config = self.load_config(config_name, config_class)

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"配置项不存在: {key}")

        try:
            self.validators[config_name](**asdict(config))
        except ValidationError as e:
            raise ConfigurationError(config_name, str(e)) from e

        self.save_config(config_name, config)

    def reset_config(self, config_name: str):
        """
        重置配置为默认值

        Args:
            config_name: 配置名称
        """
        if config_name not in self.default_configs:
            raise ConfigurationError(config_name, "未知的配置名称")

        self.save_config(config_name, self._default(config_name))
        logger.info(f"配置已重置为默认值: {config_name}")

    def get_all_configs(self) -> Dict[str, Any]:
        """
        获取所有配置

        Returns:
            Dict[str, Any]: 所有配置的字典
        """
        return {
            config_name: self.load_config(config_name, config_class)
            for config_name, config_class in self.config_types.items()
        }

    @staticmethod
    def _filter_fields(data: Dict[str, Any], dataclass_type: Type[T]) -> Dict[str, Any]:
        """过滤掉数据类中不存在的字段"""
        field_names = {f.name for f in fields(dataclass_type)}
        return {k: v for k, v in data.items() if k in field_names}
