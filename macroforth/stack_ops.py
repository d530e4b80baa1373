"""
macroforth Stack Operations - Stack manipulation words
"""

from .core import Primitive, StackUnderflow


def format_value(value):
    """Decimal text for value, hex when it is past the int conversion limit"""
    try:
        return str(value)
    except ValueError:
        return hex(value)


def format_values(values):
    return " ".join(format_value(v) for v in values)


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self._define_primitive(Primitive.DUP, self._dup)
        self._define_primitive(Primitive.DROP, self._drop)
        self._define_primitive(Primitive.SWAP, self._swap)
        self._define_primitive(Primitive.OVER, self._over)

    def _need(self, n):
        """Raise StackUnderflow unless n operands are present"""
        if len(self.data_stack) < n:
            raise StackUnderflow(f"need {n}, have {len(self.data_stack)}")

    def _pop2(self):
        """Pop a then b; the caller has already checked the depth"""
        a = self.data_stack.pop()
        b = self.data_stack.pop()
        return a, b

    def _dup(self):
        self._need(1)
        self.data_stack.append(self.data_stack[-1])

    def _drop(self):
        self._need(1)
        self.data_stack.pop()

    def _swap(self):
        self._need(2)
        a, b = self._pop2()
        self.data_stack.extend([a, b])

    def _over(self):
        self._need(2)
        self.data_stack.append(self.data_stack[-2])

    def stack(self):
        """Snapshot of the stack, bottom to top"""
        return list(self.data_stack)

    def depth(self):
        return len(self.data_stack)

    def _clear_stack(self):
        self.data_stack.clear()
        return self

    def _format_stack(self):
        return f"<{len(self.data_stack)}> " + format_values(self.data_stack)
