"""
配置管理测试

测试默认配置生成、YAML 读写、校验失败回退和配置更新。
"""

import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from russian_draughts.src.draughts_engine.config import (
    ConfigManager, DisplayConfig, LoggingConfig, RulesConfig
)
from russian_draughts.src.draughts_engine.config.model_config import (
    DEFAULT_RULES_CONFIG, LoggingSettings
)
from russian_draughts.src.draughts_engine.utils.exceptions import ConfigurationError


class TestConfigManager:
    """ConfigManager类的测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.test_dir = Path(tempfile.mkdtemp())
        self.manager = ConfigManager(str(self.test_dir / "configs"))

    def teardown_method(self):
        """每个测试方法后的清理"""
        if self.test_dir.exists():
            shutil.rmtree(self.test_dir)

    def test_default_files_created(self):
        for config_file in self.manager.config_files.values():
            assert config_file.exists()

        with open(self.manager.config_files['rules'], 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        assert data == {'enforce_turn_owner': True, 'enforce_chain_piece': True}

    def test_load_defaults(self):
        assert self.manager.get_rules_config() == RulesConfig()
        assert self.manager.get_logging_config() == LoggingConfig()
        assert self.manager.get_display_config() == DisplayConfig()

    def test_default_is_copied(self):
        self.manager.config_files['rules'].unlink()
        config = self.manager.get_rules_config()
        config.enforce_turn_owner = False

        assert DEFAULT_RULES_CONFIG.enforce_turn_owner is True

    def test_update_and_reload(self):
        self.manager.update_config('rules', enforce_turn_owner=False)

        reloaded = ConfigManager(str(self.test_dir / "configs"))
        assert reloaded.get_rules_config().enforce_turn_owner is False
        assert reloaded.get_rules_config().enforce_chain_piece is True

    def test_update_unknown_key_is_ignored(self):
        self.manager.update_config('display', no_such_option=1)
        assert self.manager.get_display_config() == DisplayConfig()

    def test_update_invalid_value_raises(self):
        with pytest.raises(ConfigurationError):
            self.manager.update_config('logging', level='verbose')
        with pytest.raises(ConfigurationError):
            self.manager.update_config('logging', max_size=0)

        # 文件保持不变
        assert self.manager.get_logging_config().level == 'INFO'

    def test_level_is_normalized(self):
        self.manager.update_config('logging', level='debug')
        assert self.manager.get_logging_config().level == 'DEBUG'

    def test_broken_yaml_falls_back(self):
        self.manager.config_files['logging'].write_text("level: [unclosed", encoding='utf-8')
        assert self.manager.get_logging_config() == LoggingConfig()

    def test_non_mapping_yaml_falls_back(self):
        self.manager.config_files['rules'].write_text("- a\n- b\n", encoding='utf-8')
        assert self.manager.get_rules_config() == RulesConfig()

    def test_invalid_value_in_file_falls_back(self):
        self.manager.config_files['logging'].write_text("backup_count: -3\n", encoding='utf-8')
        assert self.manager.get_logging_config() == LoggingConfig()

    def test_extra_keys_in_file_are_dropped(self):
        self.manager.config_files['display'].write_text(
            "show_coordinates: false\nunknown: 1\n", encoding='utf-8'
        )
        config = self.manager.get_display_config()
        assert config.show_coordinates is False
        assert config.highlight_moves is True

    def test_reset_config(self):
        self.manager.update_config('rules', enforce_chain_piece=False)
        self.manager.reset_config('rules')
        assert self.manager.get_rules_config() == RulesConfig()

    def test_unknown_config_name(self):
        with pytest.raises(ConfigurationError):
            self.manager.load_config('engine', RulesConfig)
        with pytest.raises(ConfigurationError):
            self.manager.update_config('engine', depth=3)
        with pytest.raises(ConfigurationError):
            self.manager.reset_config('engine')

    def test_get_all_configs(self):
        configs = self.manager.get_all_configs()
        assert set(configs) == {'rules', 'logging', 'display'}
        assert isinstance(configs['logging'], LoggingConfig)


class TestSettingsModels:
    """pydantic 校验模型的测试"""

    def test_logging_level_validation(self):
        assert LoggingSettings(level='warning').level == 'WARNING'
        with pytest.raises(ValueError):
            LoggingSettings(level='loud')
