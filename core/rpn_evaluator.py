"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np
import pandas as pd

from core.bindings import VariableBinding
from core.exceptions import (
    MalformedExpressionError,
    UnboundVariableError,
    UnsupportedOperatorError,
)
from core.operators import Operators
from core.stack import Stack
from core.token_system import OPERATOR_DEFINITIONS, TokenType, tokenize_postfix, tokens_to_string

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def _apply(token, stack):
        """弹出 b、a，压入 a op b"""
        info = OPERATOR_DEFINITIONS.get(token.symbol) if token.type == TokenType.OPERATOR else None
        op_method = getattr(Operators, info.name, None) if info else None
        if op_method is None:
            raise UnsupportedOperatorError(f"Unsupported operator: {token.symbol!r}")

        if len(stack) < 2:
            raise MalformedExpressionError(
                f"Insufficient operands for '{token.symbol}': {len(stack)} on stack")
        b = stack.pop_back()
        a = stack.pop_back()
        stack.push_back(op_method(a, b))

    @staticmethod
    def _result(stack, postfix):
        if stack.is_empty():
            raise MalformedExpressionError(f"Empty stack after evaluating '{postfix}'")
        if len(stack) > 1:
            raise MalformedExpressionError(
                f"Stack has {len(stack)} elements after evaluating '{postfix}', expected 1")
        return stack.back()

    @staticmethod
    def evaluate(postfix, bindings):
        """
        Args:
            postfix: 后缀表达式字符串或Token序列
            bindings: VariableBinding或普通字典
        Returns:
            整数结果
        """
        tokens = tokenize_postfix(postfix)
        bindings = VariableBinding.wrap(bindings)
        stack = Stack()

        for token in tokens:
            if token.type == TokenType.DIGIT:
                stack.push_back(token.value)
            elif token.type == TokenType.VARIABLE:
                stack.push_back(bindings[token.symbol])
            else:
                RPNEvaluator._apply(token, stack)

        result = RPNEvaluator._result(stack, tokens_to_string(tokens))
        logger.debug(f"{tokens_to_string(tokens)} = {result}")
        return result

    @staticmethod
    def evaluate_frame(postfix, frame):
        """
        对绑定表的每一行求值（每个变量一列）
        Args:
            postfix: 后缀表达式字符串或Token序列
            frame: pandas DataFrame，列名为变量标识符
        Returns:
            与frame同索引的整数Series
        """
        tokens = tokenize_postfix(postfix)
        expression = tokens_to_string(tokens)
        alphabet = ''.join(str(column) for column in frame.columns)
        data_length = len(frame)
        stack = Stack()

        for token in tokens:
            if token.type == TokenType.DIGIT:
                stack.push_back(np.full(data_length, token.value, dtype=np.int64))
            elif token.type == TokenType.VARIABLE:
                if token.symbol not in frame.columns:
                    raise UnboundVariableError(token.symbol, alphabet)
                stack.push_back(frame[token.symbol].to_numpy(dtype=np.int64))
            else:
                RPNEvaluator._apply(token, stack)

        result = RPNEvaluator._result(stack, expression)
        return pd.Series(result, index=frame.index, name=expression)


def evaluate_postfix(postfix, bindings):
    return RPNEvaluator.evaluate(postfix, bindings)
