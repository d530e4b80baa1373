"""
macroforth REPL - Interpreter assembly, Read-Eval-Print Loop and DSL interface
"""

import logging
from collections import deque

from .core import ForthBase, ForthError, Primitive
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .compiler import ForthCompiler
from .limits import ForthLimits
from .commands import Definition, parse_command, split_commands


logger = logging.getLogger(__name__)


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthCompiler, ForthLimits):
    """Complete Forth interpreter combining all mixins"""

    def __init__(self, max_expansion=None):
        super().__init__(max_expansion=max_expansion)
        if max_expansion is not None:
            self.set_expansion_limit(max_expansion)
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()

    def eval(self, text):
        """Evaluate every command in text, stopping at the first error"""
        for command in split_commands(text):
            self._eval_command(command)
        return self

    execute = eval

    def _eval_command(self, command):
        parsed = parse_command(command)
        if isinstance(parsed, Definition):
            self._queue_definition(parsed.name, parsed.tokens)
            return
        try:
            self._execute_tokens(parsed.tokens)
        except ForthError as e:
            logger.debug("aborted %r: %s", command, e)
            raise

    def _execute_tokens(self, tokens):
        """Run tokens left to right, splicing user words onto the front

        The expansion budget restarts at every token of the command itself,
        so it bounds the chain of substitutions behind one word.
        """
        remaining = deque(tokens)
        spliced = 0
        while remaining:
            token = remaining.popleft()
            if spliced:
                spliced -= 1
            else:
                self._reset_expansion_budget()
            if token.is_number:
                self.data_stack.append(token.value)
                continue
            op = self._expand_word(token.value)
            if isinstance(op, Primitive):
                self._primitive_handlers[op]()
            else:
                self._charge_expansion(token.value)
                remaining.extendleft(reversed(op.tokens))
                spliced += len(op.tokens)


class ForthREPL:
    """Mixin providing the interactive loop"""

    PROMPT = "OK> "

    def repl(self, get_input=input):
        """Start interactive REPL

        Args:
            get_input: callable taking the prompt and returning a line;
                       EOFError ends the session.
        """
        print("macroforth v1.0 - Forth con macros de usuario")
        print("Escribe 'bye' para salir, '.s' para ver la pila")
        print()

        while True:
            try:
                try:
                    line = get_input(self.PROMPT)
                except EOFError:
                    break

                line_stripped = line.strip().lower()

                if line_stripped == 'bye':
                    print("Adios!")
                    break

                if line_stripped in ('stack', '.s'):
                    print(self._format_stack())
                    continue

                if line_stripped in ('clear', 'abort'):
                    self._clear_stack()
                    print("Pila limpiada")
                    continue

                if not line_stripped:
                    continue

                try:
                    self.eval(line)
                except ForthError as e:
                    print(f"Error: {e}")
                else:
                    print(f"ok {self._format_stack()}")

            except KeyboardInterrupt:
                print("\n(Ctrl+C) Usa 'bye' para salir")

        return self


class InteractiveForth(Forth, ForthREPL):
    """Complete Interactive Forth with REPL and DSL support"""

    def __repr__(self):
        return f"<InteractiveForth {self._format_stack()}>"

    def __call__(self, text):
        return self.eval(text)

    def push(self, *values):
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"only integers can be pushed, got {v!r}")
        self.data_stack.extend(values)
        return self

    def pop(self):
        return self.data_stack.pop() if self.data_stack else None

    def peek(self):
        return self.data_stack[-1] if self.data_stack else None

    def clear(self):
        return self._clear_stack()


def evaluate(lines, max_expansion=None):
    """Evaluate each input string on a fresh interpreter and return the stack"""
    forth = Forth(max_expansion=max_expansion)
    for line in lines:
        forth.eval(line)
    return forth.stack()
