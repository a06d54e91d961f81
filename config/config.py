"""配置文件"""

# 求值参数
CALCULATOR_CONFIG = {
    "evaluation_strategy": "splice",  # 'splice' 或 'stack'，两者结果一致
}

# 交互循环参数
REPL_CONFIG = {
    "quit_commands": ("quit", "q"),  # 忽略大小写
    "prompt": "",  # 不输出提示符
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["evaluation_strategy"] in ("splice", "stack"), \
        "evaluation_strategy 必须是 'splice' 或 'stack'"
    assert REPL_CONFIG["quit_commands"], "至少需要一个退出命令"
    assert all(cmd == cmd.strip().lower() for cmd in REPL_CONFIG["quit_commands"]), \
        "退出命令需为小写且不含空白"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), \
        "未知的日志级别"
