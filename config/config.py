"""配置文件"""

# 变量绑定
VARIABLE_CONFIG = {
    "alphabet": "abcdef",  # 可绑定的单字母标识符，按值文件中的行序对应
    "values_path": "values.txt",
}

# 中缀转换
CONVERTER_CONFIG = {
    "strict": False,  # False: 忽略多余括号和无法识别的字符；True: 抛出异常
}

# 数据路径
DATA_CONFIG = {
    "expressions_path": None,  # None 时使用 DEFAULT_EXPRESSIONS
    "bindings_csv": None,      # 批量求值用的绑定表（每个变量一列）
    "output_path": "postfix_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 默认表达式
DEFAULT_EXPRESSIONS = [
    "a - b + c",
    "a - (b / c * d)",
    "a / (b * c)",
    "a / b / c - (d + e) * f",
    "(a + b) * c",
    "a * (b / c / d) + e",
    "a - (b + c)",
    "a - (b + c * d) / e",
]

SEPARATOR = "-" * 40


# 验证配置
def validate_config():
    """验证配置的合理性"""
    alphabet = VARIABLE_CONFIG["alphabet"]
    assert alphabet, "alphabet不能为空"
    assert all(ch.isalpha() and len(ch) == 1 for ch in alphabet), "标识符必须是单个字母"
    assert len(set(alphabet)) == len(alphabet), "alphabet中不能有重复标识符"
    assert isinstance(CONVERTER_CONFIG["strict"], bool), "strict必须是bool"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR"), "未知日志级别"
    return True
