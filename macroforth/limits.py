"""
macroforth Limits - Expansion budget for macro substitution
"""

from .core import ExpansionLimit


class ForthLimits:
    """Mixin providing the expansion budget controls"""

    @property
    def expansion_limit(self):
        return self._max_expansion

    def set_expansion_limit(self, limit):
        """Set the maximum substitutions behind one executed word (Python API)"""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"expansion limit must be a positive integer, got {limit!r}")
        self._max_expansion = limit
        return self

    def _reset_expansion_budget(self):
        self._expansion_count = 0

    def _charge_expansion(self, name):
        """Count one substitution of name; raise once the budget is spent"""
        self._expansion_count += 1
        if self._expansion_count > self._max_expansion:
            raise ExpansionLimit(f"'{name}' after {self._max_expansion} substitutions")
