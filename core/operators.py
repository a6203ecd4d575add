"""core/operators.py"""
import numpy as np

from core.exceptions import DivisionByZeroError


class Operators:
    """二元操作符的静态方法集合；同时支持Python整数和numpy整数数组"""

    @staticmethod
    def add(a, b):
        return a + b

    @staticmethod
    def sub(a, b):
        return a - b

    @staticmethod
    def mul(a, b):
        return a * b

    @staticmethod
    def div(a, b):
        """整数除法，向零截断"""
        if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
            a = np.asarray(a, dtype=np.int64)
            b = np.asarray(b, dtype=np.int64)
            zero_rows = np.flatnonzero(b == 0)
            if zero_rows.size:
                raise DivisionByZeroError(
                    f"Division by zero in {zero_rows.size} row(s), first at row {zero_rows[0]}")
            quotient = np.abs(a) // np.abs(b)
            return np.where((a < 0) ^ (b < 0), -quotient, quotient)

        if b == 0:
            raise DivisionByZeroError("Division by zero error")
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient
