"""工具模块"""
from .formatting import substitute_values, format_trace

__all__ = ['substitute_values', 'format_trace']
