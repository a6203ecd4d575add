"""核心模块 - Token系统、栈、转换器和RPN求值器"""
from .exceptions import (
    ExpressionError, EmptyStackError, MalformedExpressionError,
    UnboundVariableError, DivisionByZeroError, UnsupportedOperatorError,
    UnmatchedParenthesisError, UnrecognizedTokenError
)
from .stack import Stack
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, precedence, classify,
    tokenize, tokenize_postfix, tokens_to_string
)
from .bindings import VariableBinding, DEFAULT_ALPHABET, validate_alphabet
from .operators import Operators
from .converter import InfixConverter, infix_to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix


def evaluate_expression(infix, bindings, strict=False):
    """中缀表达式 -> (后缀字符串, 结果)"""
    postfix = InfixConverter.convert(infix, strict=strict)
    return tokens_to_string(postfix), RPNEvaluator.evaluate(postfix, bindings)


__all__ = [
    'ExpressionError', 'EmptyStackError', 'MalformedExpressionError',
    'UnboundVariableError', 'DivisionByZeroError', 'UnsupportedOperatorError',
    'UnmatchedParenthesisError', 'UnrecognizedTokenError',
    'Stack', 'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'precedence',
    'classify', 'tokenize', 'tokenize_postfix', 'tokens_to_string',
    'VariableBinding', 'DEFAULT_ALPHABET', 'validate_alphabet', 'Operators',
    'InfixConverter', 'infix_to_postfix', 'RPNEvaluator', 'evaluate_postfix',
    'evaluate_expression'
]
