"""core/exceptions.py - 表达式转换与求值的异常体系"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class EmptyStackError(ExpressionError):
    """空栈上执行 back()/peek()"""


class MalformedExpressionError(ExpressionError):
    """后缀表达式栈下溢，或求值结束时栈内不是恰好一个值"""


class UnboundVariableError(ExpressionError):
    """变量不在绑定表的定义域内"""

    def __init__(self, name, alphabet=None):
        self.name = name
        self.alphabet = alphabet
        if alphabet:
            message = f"Variable '{name}' is not bound (domain: {alphabet})"
        else:
            message = f"Variable '{name}' is not bound"
        super().__init__(message)


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    """除法右操作数为 0"""


class UnsupportedOperatorError(ExpressionError):
    """求值器遇到无法识别的操作符"""


class UnmatchedParenthesisError(ExpressionError):
    """严格模式：括号不匹配"""


class UnrecognizedTokenError(ExpressionError):
    """严格模式：无法识别的字符"""
