"""
macroforth Commands - Splitting input into commands and classifying them
"""

from .core import InvalidWord, tokenize


COLON = ':'
SEMICOLON = ';'


class Expression:
    """Tokens evaluated immediately against the stack"""
    __slots__ = ('tokens',)

    def __init__(self, tokens):
        self.tokens = list(tokens)

    def __repr__(self):
        return f"Expression({self.tokens!r})"


class Definition:
    """A ': name body ;' command, queued for expansion"""
    __slots__ = ('name', 'tokens')

    def __init__(self, name, tokens):
        self.name = name
        self.tokens = list(tokens)

    def __repr__(self):
        return f"Definition({self.name!r}, {self.tokens!r})"


def _is_word(token, name):
    return token.is_word and token.value == name


def split_commands(text):
    """Split text into command strings on ':' and ';' boundaries

    A ':' closes whatever came before it and opens a new command, a ';'
    closes the current command including itself. Empty commands are dropped.
    """
    commands = []
    current = []
    for piece in text.split():
        if piece == COLON:
            if current:
                commands.append(' '.join(current))
            current = [piece]
        elif piece == SEMICOLON:
            current.append(piece)
            commands.append(' '.join(current))
            current = []
        else:
            current.append(piece)
    if current:
        commands.append(' '.join(current))
    return commands


def parse_command(command):
    """Classify a single command string as a Definition or an Expression"""
    tokens = tokenize(command)
    if not tokens or not _is_word(tokens[0], COLON):
        return Expression(tokens)

    if len(tokens) < 3 or not _is_word(tokens[-1], SEMICOLON):
        raise InvalidWord(command)

    name = tokens[1]
    if not name.is_word or name.value in (COLON, SEMICOLON):
        raise InvalidWord(command)

    return Definition(name.value, tokens[2:-1])
