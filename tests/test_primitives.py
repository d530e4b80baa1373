"""Tests for the built-in arithmetic and stack words."""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from macroforth import Forth, DivisionByZero, StackUnderflow
from macroforth.arithmetic import truncating_div


def run(text):
    return Forth().eval(text).stack()


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic Tests
# ═══════════════════════════════════════════════════════════════════════

class TestArithmetic(unittest.TestCase):

    def test_push_only(self):
        self.assertEqual(run("1 2 3"), [1, 2, 3])
        self.assertEqual(run("-1 -2"), [-1, -2])

    def test_add(self):
        self.assertEqual(run("1 2 +"), [3])

    def test_sub(self):
        self.assertEqual(run("3 4 -"), [-1])

    def test_mul(self):
        self.assertEqual(run("2 4 *"), [8])

    def test_div(self):
        self.assertEqual(run("6 2 /"), [3])
        self.assertEqual(run("8 3 /"), [2])

    def test_div_truncates_toward_zero(self):
        self.assertEqual(run("-7 2 /"), [-3])
        self.assertEqual(run("7 -2 /"), [-3])
        self.assertEqual(run("-7 -2 /"), [3])

    def test_truncating_div(self):
        self.assertEqual(truncating_div(9, 4), 2)
        self.assertEqual(truncating_div(-9, 4), -2)
        self.assertEqual(truncating_div(0, -4), 0)

    def test_div_by_zero_leaves_stack(self):
        f = Forth()
        with self.assertRaises(DivisionByZero):
            f.eval("5 0 /")
        self.assertEqual(f.stack(), [5, 0])

    # Depth is checked before the divisor, so a lone zero is an underflow.
    def test_lone_zero_divisor_is_underflow(self):
        f = Forth()
        with self.assertRaises(StackUnderflow):
            f.eval("0 /")
        self.assertEqual(f.stack(), [0])

    def test_combined(self):
        self.assertEqual(run("1 2 + 4 *"), [12])
        self.assertEqual(run("3 4 * 2 /"), [6])

    def test_underflow(self):
        for text in ("+", "1 +", "-", "1 -", "*", "1 *", "/", "1 /"):
            f = Forth()
            with self.assertRaises(StackUnderflow, msg=text):
                f.eval(text)

    def test_underflow_leaves_stack(self):
        f = Forth()
        with self.assertRaises(StackUnderflow):
            f.eval("1 +")
        self.assertEqual(f.stack(), [1])


# ═══════════════════════════════════════════════════════════════════════
# Stack Manipulation Tests
# ═══════════════════════════════════════════════════════════════════════

class TestStackWords(unittest.TestCase):

    def test_dup(self):
        self.assertEqual(run("1 dup"), [1, 1])
        self.assertEqual(run("1 2 dup"), [1, 2, 2])

    def test_drop(self):
        self.assertEqual(run("1 drop"), [])
        self.assertEqual(run("1 2 drop"), [1])

    def test_swap(self):
        self.assertEqual(run("1 2 swap"), [2, 1])
        self.assertEqual(run("1 2 3 swap"), [1, 3, 2])

    def test_over(self):
        self.assertEqual(run("1 2 over"), [1, 2, 1])
        self.assertEqual(run("1 2 3 over"), [1, 2, 3, 2])

    def test_underflow(self):
        for text in ("dup", "drop", "swap", "1 swap", "over", "1 over"):
            f = Forth()
            with self.assertRaises(StackUnderflow, msg=text):
                f.eval(text)

    def test_case_insensitive(self):
        self.assertEqual(run("1 DUP Dup dup"), [1, 1, 1, 1])
        self.assertEqual(run("1 2 SWAP 3 OVER DROP"), [2, 1, 3])

    def test_error_keeps_earlier_effects(self):
        f = Forth()
        with self.assertRaises(StackUnderflow):
            f.eval("1 2 + drop drop")
        self.assertEqual(f.stack(), [])

    def test_stack_is_a_snapshot(self):
        f = Forth().eval("1 2")
        snapshot = f.stack()
        snapshot.append(99)
        self.assertEqual(f.stack(), [1, 2])
        self.assertEqual(f.depth(), 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
