"""配置文件"""

# 表达式求值参数
EVALUATOR_CONFIG = {
    "token_separator": " ",  # 后缀Token之间的分隔符
    "decimal_point": ".",  # 固定小数点，不做本地化
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# CLI
CLI_CONFIG = {
    "prompt": " ~ ",
    "exit_commands": ("exit", "quit"),
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from evaluator.token_system import OPERATOR_CHARS
    separator = EVALUATOR_CONFIG["token_separator"]
    assert len(separator) == 1 and separator.isspace(), "分隔符必须是单个空白字符"
    assert EVALUATOR_CONFIG["decimal_point"] == ".", "只支持 '.' 作为小数点"
    assert separator not in OPERATOR_CHARS, "分隔符不能是操作符"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
