"""Evaluation of boolean expressions over TRUE/FALSE with !, && and ||."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"

_MAPPINGS = {
    "TRUE": True,
    "!FALSE": True,
    "FALSE": False,
    "!TRUE": False,
}


class BoolExprError(ValueError):
    """Raised when an expression cannot be evaluated."""


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def take(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    @property
    def rest(self) -> str:
        return self.text[self.pos:]


class BoolExprParser:
    """Recursive-descent evaluator; || binds looser than &&, which binds looser than !."""

    def evaluate(self, text: str) -> bool:
        """Evaluate the whole text, raising BoolExprError if any of it is invalid."""
        cursor = _Cursor(text)
        try:
            result = self._expression(cursor)
        except RecursionError:
            raise BoolExprError("Expression nested too deeply") from None
        if result is None or cursor.rest:
            raise BoolExprError(
                f"Failed to evaluate the boolean expression, remained: {cursor.rest!r}"
            )
        return result

    def _expression(self, cur: _Cursor) -> bool | None:
        lhs = self._term(cur)
        if lhs is None:
            return None
        while True:
            cur.skip_whitespace()
            if not cur.take("||"):
                return lhs
            rhs = self._term(cur)
            if rhs is None:
                return None
            lhs = lhs or rhs

    def _term(self, cur: _Cursor) -> bool | None:
        lhs = self._factor(cur)
        if lhs is None:
            return None
        while True:
            cur.skip_whitespace()
            if not cur.take("&&"):
                return lhs
            rhs = self._factor(cur)
            if rhs is None:
                return None
            lhs = lhs and rhs

    def _factor(self, cur: _Cursor) -> bool | None:
        cur.skip_whitespace()
        if cur.take("!"):
            inner = self._factor(cur)
            return None if inner is None else not inner
        if cur.take("("):
            inner = self._expression(cur)
            if inner is None:
                return None
            cur.skip_whitespace()
            return inner if cur.take(")") else None
        if cur.take("TRUE"):
            return True
        if cur.take("FALSE"):
            return False
        return None


def string_to_bool(text: str) -> bool:
    """Map TRUE, !FALSE, FALSE and !TRUE to their values; anything else is False."""
    return _MAPPINGS.get(text, False)