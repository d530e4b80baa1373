"""
macroforth Arithmetic - Integer operations
"""

from .core import DivisionByZero, Primitive


def truncating_div(b, a):
    """Integer division rounding toward zero"""
    q = abs(b) // abs(a)
    return q if (b < 0) == (a < 0) else -q


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self._define_primitive(Primitive.ADD, self._plus)
        self._define_primitive(Primitive.SUB, self._minus)
        self._define_primitive(Primitive.MUL, self._mult)
        self._define_primitive(Primitive.DIV, self._div)

    def _plus(self):
        self._need(2)
        a, b = self._pop2()
        self.data_stack.append(b + a)

    def _minus(self):
        self._need(2)
        a, b = self._pop2()
        self.data_stack.append(b - a)

    def _mult(self):
        self._need(2)
        a, b = self._pop2()
        self.data_stack.append(b * a)

    def _div(self):
        self._need(2)
        if self.data_stack[-1] == 0:
            raise DivisionByZero()
        a, b = self._pop2()
        self.data_stack.append(truncating_div(b, a))
