"""core/token_system.py"""
import string
from enum import Enum
from typing import NamedTuple, Optional

from core.exceptions import UnrecognizedTokenError


class TokenType(Enum):
    DIGIT = "digit"        # 单个数字操作数
    VARIABLE = "variable"  # 单字母变量
    OPERATOR = "operator"  # 二元操作符
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token(NamedTuple):
    type: TokenType
    symbol: str
    value: Optional[int] = None

    @property
    def is_operand(self):
        return self.type in (TokenType.DIGIT, TokenType.VARIABLE)

    def __str__(self):
        return self.symbol


class OperatorInfo(NamedTuple):
    name: str
    precedence: int


# 二元操作符定义（左结合）
OPERATOR_DEFINITIONS = {
    '+': OperatorInfo('add', 1),
    '-': OperatorInfo('sub', 1),
    '*': OperatorInfo('mul', 2),
    '/': OperatorInfo('div', 2),
}

LPAREN = Token(TokenType.LPAREN, '(')
RPAREN = Token(TokenType.RPAREN, ')')


def precedence(symbol):
    """操作符优先级：+,- 为1；*,/ 为2；其他为0"""
    info = OPERATOR_DEFINITIONS.get(symbol)
    return info.precedence if info else 0


def classify(ch):
    """把单个字符分类为Token；无法分类时返回None"""
    if ch in string.digits:
        return Token(TokenType.DIGIT, ch, int(ch))
    if ch in string.ascii_letters:
        return Token(TokenType.VARIABLE, ch)
    if ch in OPERATOR_DEFINITIONS:
        return Token(TokenType.OPERATOR, ch)
    if ch == '(':
        return LPAREN
    if ch == ')':
        return RPAREN
    return None


def tokenize(expression, strict=False):
    """
    逐字符扫描，每个字符最多产生一个Token
    Args:
        expression: 表达式字符串
        strict: 为True时，非空白的无法识别字符抛出UnrecognizedTokenError
    Returns:
        Token列表
    """
    tokens = []
    for position, ch in enumerate(expression):
        token = classify(ch)
        if token is not None:
            tokens.append(token)
        elif strict and not ch.isspace():
            raise UnrecognizedTokenError(
                f"Unrecognized character {ch!r} at position {position}")
    return tokens


def ensure_tokens(expression, strict=False):
    """字符串先分词，Token序列原样返回"""
    if isinstance(expression, str):
        return tokenize(expression, strict=strict)
    return list(expression)


def tokens_to_string(tokens):
    return ''.join(token.symbol for token in tokens)


def tokenize_postfix(expression):
    """
    后缀表达式分词：除空白外每个字符都保留；
    非操作数、非括号的字符一律视为操作符位置的Token，由求值器判断是否支持
    """
    if not isinstance(expression, str):
        return list(expression)
    tokens = []
    for ch in expression:
        if ch.isspace():
            continue
        token = classify(ch)
        tokens.append(token if token is not None else Token(TokenType.OPERATOR, ch))
    return tokens
