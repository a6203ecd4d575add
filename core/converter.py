"""中缀 -> 后缀转换（调度场算法）"""
import logging

from core.exceptions import UnmatchedParenthesisError
from core.stack import Stack
from core.token_system import TokenType, ensure_tokens, precedence, tokens_to_string

logger = logging.getLogger(__name__)


class InfixConverter:
    """把中缀表达式转换为后缀Token序列"""

    @staticmethod
    def convert(expression, strict=False):
        """
        Args:
            expression: 中缀表达式字符串或Token序列
            strict: 严格模式下括号不匹配抛出UnmatchedParenthesisError；
                    宽松模式下多余的括号被忽略
        Returns:
            后缀顺序的Token列表
        """
        op_stack = Stack()
        output = []

        for token in ensure_tokens(expression, strict=strict):
            if token.is_operand:
                output.append(token)

            elif token.type == TokenType.LPAREN:
                op_stack.push_back(token)

            elif token.type == TokenType.RPAREN:
                while not op_stack.is_empty() and op_stack.back().type != TokenType.LPAREN:
                    output.append(op_stack.pop_back())
                if op_stack.is_empty():
                    if strict:
                        raise UnmatchedParenthesisError("Unmatched ')' in expression")
                    logger.debug("Ignoring unmatched ')'")
                else:
                    op_stack.pop_back()  # 丢弃 '('

            elif token.type == TokenType.OPERATOR:
                # 优先级相等时先弹出（左结合）
                while (not op_stack.is_empty()
                       and precedence(op_stack.back().symbol) >= precedence(token.symbol)):
                    output.append(op_stack.pop_back())
                op_stack.push_back(token)

        while not op_stack.is_empty():
            token = op_stack.pop_back()
            if token.type == TokenType.LPAREN:
                if strict:
                    raise UnmatchedParenthesisError("Unmatched '(' in expression")
                logger.debug("Discarding unmatched '('")
                continue
            output.append(token)

        logger.debug(f"Converted to postfix: {tokens_to_string(output)}")
        return output


def infix_to_postfix(expression, strict=False):
    """返回后缀表达式字符串"""
    return tokens_to_string(InfixConverter.convert(expression, strict=strict))
