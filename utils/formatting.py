"""utils/formatting.py"""
from config.config import SEPARATOR


def substitute_values(infix, bindings):
    """把已绑定的变量替换为其值（仅用于显示）"""
    return ''.join(str(bindings[ch]) if ch in bindings else ch for ch in infix)


def format_trace(infix, bindings, postfix, result=None, error=None):
    """单个表达式的输出行"""
    lines = [
        f"Infix expression: {infix}",
        f"Modified Infix expression: {substitute_values(infix, bindings)}",
        f"Postfix expression: {postfix if postfix is not None else '<conversion failed>'}",
    ]
    if error is not None:
        lines.append(f"Error: {error}")
    else:
        lines.append(f"The result of the expression is: {result}")
    lines.append(SEPARATOR)
    return lines
