"""core/stack.py - 后进先出栈"""
from core.exceptions import EmptyStackError


class Stack:
    """LIFO栈，只允许在尾部操作"""

    def __init__(self):
        self._items = []

    def push_back(self, item):
        self._items.append(item)

    def pop_back(self):
        """弹出栈顶元素；空栈时什么也不做，返回None"""
        if not self._items:
            return None
        return self._items.pop()

    def back(self):
        """返回栈顶元素，空栈抛出EmptyStackError"""
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items[-1]

    peek = back

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"
