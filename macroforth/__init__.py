"""
macroforth - Stack-based Forth dialect with user-defined word macros
Modular package implementation

Usage:
    from macroforth import Forth
    forth = Forth()
    forth.eval(": double 2 * ; 3 double")
    forth.stack()                           # [6]
"""

from .core import (ForthError, DivisionByZero, StackUnderflow, UnknownWord,
                   InvalidWord, ExpansionLimit, Token, TokenType, Primitive,
                   UserDefined, tokenize, DEFAULT_MAX_EXPANSION)
from .commands import Expression, Definition, split_commands, parse_command
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .compiler import ForthCompiler
from .limits import ForthLimits
from .repl import Forth, ForthREPL, InteractiveForth, evaluate

__all__ = ['Forth', 'InteractiveForth', 'evaluate', 'ForthError',
           'DivisionByZero', 'StackUnderflow', 'UnknownWord', 'InvalidWord',
           'ExpansionLimit']
__version__ = '1.0.0'
