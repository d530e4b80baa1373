"""
macroforth Core - Base class with fundamental infrastructure
- Exception classes
- Tokens and tokenizer
- Operation table, pending definitions and stack ownership
- Base initialization
"""

import logging
import os
import re
from collections import deque, namedtuple
from enum import Enum


logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPANSION = 100000
MAX_EXPANSION_ENV = 'MACROFORTH_MAX_EXPANSION'


class ForthError(Exception):
    """Base error carrying the Forth THROW code"""
    code = -1
    message = "forth error"

    def __init__(self, detail=None):
        self.detail = detail
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class DivisionByZero(ForthError):
    code = -10
    message = "division by zero"


class StackUnderflow(ForthError):
    code = -4
    message = "stack underflow"


class UnknownWord(ForthError):
    code = -13
    message = "unknown word"


class InvalidWord(ForthError):
    code = -32
    message = "invalid word definition"


class ExpansionLimit(ForthError):
    """Too many macro substitutions, usually a word defined through itself"""
    code = -5
    message = "expansion limit exceeded"


class TokenType(Enum):
    NUMBER = 'number'
    WORD = 'word'

    def __str__(self):
        return self.name


class Token(namedtuple('Token', ['type', 'value'])):
    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, int(value))

    @classmethod
    def word(cls, name):
        return cls(TokenType.WORD, name)

    @property
    def is_number(self):
        return self.type is TokenType.NUMBER

    @property
    def is_word(self):
        return self.type is TokenType.WORD

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Token({self.type}, {self.value!r})"


class Primitive(Enum):
    """The built-in stack operations, valued by their canonical names"""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    DUP = 'dup'
    DROP = 'drop'
    SWAP = 'swap'
    OVER = 'over'

    def __str__(self):
        return self.value


class UserDefined:
    """A fully expanded user word: numbers and primitive names only"""
    __slots__ = ('tokens',)

    def __init__(self, tokens):
        self.tokens = tuple(tokens)

    def __eq__(self, other):
        return isinstance(other, UserDefined) and self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __repr__(self):
        return f"UserDefined({' '.join(str(t) for t in self.tokens)})"


_NUMBER_RE = re.compile(r'[+-]?[0-9]+')


def parse_number(piece):
    """Return the integer for a signed decimal literal, else None"""
    if not _NUMBER_RE.fullmatch(piece):
        return None
    try:
        return int(piece)
    except ValueError:
        # over the interpreter's int string conversion limit
        return None


def tokenize(text):
    """Lowercase and split on whitespace into Number and Word tokens"""
    tokens = []
    for piece in text.lower().split():
        value = parse_number(piece)
        if value is None:
            tokens.append(Token.word(piece))
        else:
            tokens.append(Token.number(value))
    return tokens


def _max_expansion_from_env():
    raw = os.environ.get(MAX_EXPANSION_ENV)
    if raw is None:
        return DEFAULT_MAX_EXPANSION
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", MAX_EXPANSION_ENV, raw)
        return DEFAULT_MAX_EXPANSION
    if value <= 0:
        logger.warning("ignoring %s=%r: must be positive", MAX_EXPANSION_ENV, raw)
        return DEFAULT_MAX_EXPANSION
    return value


class ForthBase:
    """Base mixin providing core infrastructure"""

    def __init__(self, max_expansion=None):
        self.data_stack = []
        self.words = {}
        self._pending = deque()
        self._primitive_handlers = {}

        if max_expansion is None:
            max_expansion = _max_expansion_from_env()
        self._max_expansion = max_expansion
        self._expansion_count = 0

    def _define_primitive(self, primitive, handler):
        """Install a primitive in the table and bind its handler"""
        self.words[primitive.value] = primitive
        self._primitive_handlers[primitive] = handler

    def _lookup_word(self, name):
        """Return the table entry for name or raise UnknownWord"""
        try:
            return self.words[name]
        except KeyError:
            raise UnknownWord(name) from None
