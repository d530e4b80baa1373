"""
macroforth Compiler - Word definitions and macro expansion

Definitions are not compiled when they are read. They wait in a FIFO
queue and are flattened the first time a lookup needs them; at that point
every queued definition is expanded in order, so forward references and
redefinitions inside one batch resolve against the freshest table.
"""

import logging
from collections import deque

from .core import Primitive, UserDefined


logger = logging.getLogger(__name__)


class ForthCompiler:
    """Mixin providing word definition and expansion"""

    def _queue_definition(self, name, tokens):
        """Queue a raw definition; it is expanded on the next drain"""
        self._pending.append((name, tuple(tokens)))
        logger.debug("queued definition %r (%d pending)", name, len(self._pending))

    def _is_pending(self, name):
        return any(pending_name == name for pending_name, _ in self._pending)

    def _expand_word(self, name):
        """Resolve name to an Operation, draining pending definitions first

        The drain only runs when name is missing from the table or has a
        newer definition waiting in the queue.
        """
        if name not in self.words or self._is_pending(name):
            self._drain_pending()
        return self._lookup_word(name)

    def _drain_pending(self):
        if self._pending:
            logger.debug("draining %d pending definitions", len(self._pending))
        while self._pending:
            name, raw_tokens = self._pending.popleft()
            body = self._expand_raw_definition(name, raw_tokens)
            self.words[name] = UserDefined(body)
            logger.debug("installed %r as %r", name, self.words[name])

    def _expand_raw_definition(self, name, raw_tokens):
        """Flatten a definition body into numbers and primitive names

        User words are spliced onto the front of the remaining input so
        nested bodies read as if written inline. Unknown words are dropped;
        the error surfaces only if the word is executed later.
        """
        saved_count = self._expansion_count
        self._reset_expansion_budget()
        try:
            remaining = deque(raw_tokens)
            buf = []
            while remaining:
                token = remaining.popleft()
                if token.is_number:
                    buf.append(token)
                    continue
                op = self.words.get(token.value)
                if op is None:
                    logger.debug("dropping unknown word %r in definition of %r",
                                 token.value, name)
                elif isinstance(op, Primitive):
                    buf.append(token)
                else:
                    self._charge_expansion(token.value)
                    remaining.extendleft(reversed(op.tokens))
            return buf
        finally:
            self._expansion_count = saved_count

    def words_list(self):
        """All names in the table, in the order they were first installed"""
        self._drain_pending()
        return list(self.words)

    def pending(self):
        """Names of definitions queued but not yet expanded"""
        return [name for name, _ in self._pending]

    def see(self, name):
        """Return the expanded definition of name as source text"""
        name = name.lower()
        op = self._expand_word(name)
        if isinstance(op, Primitive):
            return f": {name} <primitive> ;"
        body = " ".join(str(token) for token in op.tokens)
        return f": {name} {body} ;" if body else f": {name} ;"
