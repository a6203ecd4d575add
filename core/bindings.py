"""core/bindings.py - 有界变量绑定表"""
import string
from collections.abc import Mapping

from core.exceptions import UnboundVariableError

DEFAULT_ALPHABET = 'abcdef'


def validate_alphabet(alphabet):
    """标识符必须是互不重复的单个ASCII字母"""
    invalid = [ch for ch in alphabet if ch not in string.ascii_letters]
    if invalid:
        raise ValueError(f"Alphabet {alphabet!r} contains non-letter identifiers: {invalid}")
    duplicates = sorted({ch for ch in alphabet if alphabet.count(ch) > 1})
    if duplicates:
        raise ValueError(f"Alphabet {alphabet!r} repeats identifiers: {duplicates}")
    return alphabet


class VariableBinding(Mapping):
    """
    单字母标识符 -> 整数 的只读映射。
    定义域为alphabet；定义域外的标识符、或定义域内未赋值的标识符，
    查找时都抛出UnboundVariableError。
    """

    def __init__(self, values=None, alphabet=DEFAULT_ALPHABET):
        self.alphabet = validate_alphabet(''.join(alphabet))
        self._values = {}
        for name, value in (values or {}).items():
            if not isinstance(name, str) or len(name) != 1 or name not in self.alphabet:
                raise ValueError(f"Identifier {name!r} is outside the alphabet {self.alphabet!r}")
            self._values[name] = int(value)

    @classmethod
    def from_sequence(cls, values, alphabet=DEFAULT_ALPHABET):
        """按标识符顺序赋值：第i个值绑定到alphabet[i]"""
        validate_alphabet(alphabet)
        values = list(values)
        if len(values) > len(alphabet):
            raise ValueError(f"Got {len(values)} values for {len(alphabet)} identifiers")
        return cls(dict(zip(alphabet, values)), alphabet=alphabet)

    @classmethod
    def wrap(cls, bindings):
        """普通字典以其自身的键作为定义域"""
        if isinstance(bindings, VariableBinding):
            return bindings
        return cls(bindings, alphabet=''.join(str(name) for name in bindings))

    def __getitem__(self, name):
        try:
            return self._values[name]
        except KeyError:
            raise UnboundVariableError(name, self.alphabet) from None

    def __contains__(self, name):
        return name in self._values

    def get(self, name, default=None):
        return self._values.get(name, default)

    def __iter__(self):
        return (name for name in self.alphabet if name in self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"VariableBinding({dict(self)!r}, alphabet={self.alphabet!r})"
