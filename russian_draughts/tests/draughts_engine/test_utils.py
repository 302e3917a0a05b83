"""
工具模块测试

测试日志系统和异常类型。
"""

import logging
import shutil
import tempfile
from pathlib import Path

from russian_draughts.src.draughts_engine.config import LoggingConfig
from russian_draughts.src.draughts_engine.rules_engine import MoveError, MoveValidator
from russian_draughts.src.draughts_engine.utils import (
    ConfigurationError, DraughtsError, GameStateError, InvalidMoveError,
    InvalidPositionError, LoggerMixin, get_logger, setup_logger, setup_logger_from_config
)


class TestLogger:
    """测试日志系统"""

    def test_setup_logger(self):
        logger = setup_logger(name="draughts_test_logger", level="DEBUG", console_output=True)

        assert logger.name == "draughts_test_logger"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_is_idempotent(self):
        first = setup_logger(name="draughts_idempotent_logger")
        second = setup_logger(name="draughts_idempotent_logger", level="ERROR")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.INFO

    def test_file_logger(self):
        temp_dir = tempfile.mkdtemp()

        try:
            logger = setup_logger(
                name="draughts_file_logger",
                log_file="test.log",
                log_dir=str(Path(temp_dir) / "nested" / "logs"),
                console_output=False
            )
            logger.info("测试日志消息")

            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)

            log_file = Path(temp_dir) / "nested" / "logs" / "test.log"
            assert log_file.exists()
            assert "测试日志消息" in log_file.read_text(encoding='utf-8')
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def test_setup_from_config(self):
        """按日志配置设置，重复应用时替换处理器"""
        name = "draughts_config_logger"
        logger = setup_logger_from_config(LoggingConfig(level='warning'), name=name)

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

        logger = setup_logger_from_config(LoggingConfig(console_output=False), name=name)
        assert logger.level == logging.INFO
        assert logger.handlers == []

    def test_debug_overrides_config(self):
        name = "draughts_debug_logger"
        logger = setup_logger_from_config(LoggingConfig(console_output=False), debug=True, name=name)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_logger_mixin_name(self):
        validator = MoveValidator()
        assert isinstance(validator, LoggerMixin)
        assert validator.logger.name == "russian_draughts.MoveValidator"
        assert validator.logger.name.startswith(get_logger().name + ".")


class TestExceptions:
    """测试异常类型"""

    def test_base_error_format(self):
        error = DraughtsError("出错了")
        assert error.error_code == "DraughtsError"
        assert str(error) == "[DraughtsError] 出错了"

    def test_invalid_move_error(self):
        error = InvalidMoveError("c3 -> c4", MoveError.NON_DIAGONAL_MOVE)
        assert isinstance(error, DraughtsError)
        assert error.error_code == "INVALID_MOVE"
        assert error.reason is MoveError.NON_DIAGONAL_MOVE
        assert "non_diagonal_move" in str(error)

    def test_other_errors(self):
        assert InvalidPositionError((8, 8)).error_code == "INVALID_POSITION"
        assert "尺寸" in str(GameStateError("矩阵", "尺寸不符"))
        assert ConfigurationError("rules", "未知").config_name == "rules"
