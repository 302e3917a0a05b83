"""
异常定义

定义俄罗斯跳棋规则引擎的各种异常类型。

注意: 非法走法不会通过异常传递，``try_move`` 返回带原因的 ``MoveResult``。
这里的异常只用于希望以异常方式处理的调用方和构造阶段的编程错误。
"""


class DraughtsError(Exception):
    """
    跳棋引擎基础异常

    所有跳棋相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidMoveError(DraughtsError):
    """
    非法走法异常

    由 ``RuleEngine.apply_move`` 在走法被拒绝时抛出，携带拒绝原因。
    """

    def __init__(self, move_str: str, reason=None):
        message = f"非法走法: {move_str}"
        if reason is not None:
            message += f" - {getattr(reason, 'value', reason)}"
        super().__init__(message, "INVALID_MOVE")
        self.move_str = move_str
        self.reason = reason


class InvalidPositionError(DraughtsError):
    """
    无效位置异常

    当写入棋盘范围之外的格子时抛出。
    """

    def __init__(self, pos, reason: str = ""):
        message = f"无效的位置坐标: {pos}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_POSITION")
        self.pos = pos
        self.reason = reason


class GameStateError(DraughtsError):
    """
    游戏状态异常

    当棋局状态无效或不一致时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class ConfigurationError(DraughtsError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
