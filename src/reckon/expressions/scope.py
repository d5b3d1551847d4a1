"""Lexical scope for user bindings.

Bindings are made by whatever drives a session (e.g. assignment
statements); the evaluator only reads them. Scopes chain outward to a
parent on a miss.
"""

from typing import TYPE_CHECKING

from reckon.expressions.errors import UnknownIdentifierError

if TYPE_CHECKING:
    from reckon.expressions.values import Value


class Scope:
    """Mapping from case-sensitive names to values, with an optional parent.

    Usage:
        session = Scope()
        session.set("x", NumberValue(Number.from_int(5)))
        inner = session.child()
        inner.get("x")  # found in the enclosing scope
    """

    def __init__(
        self,
        bindings: "dict[str, Value] | None" = None,
        parent: "Scope | None" = None,
    ):
        self._bindings: dict[str, Value] = dict(bindings or {})
        self.parent = parent

    def get(self, name: str) -> "Value":
        """Look a name up here, then in enclosing scopes.

        Raises:
            UnknownIdentifierError: If no scope in the chain binds the name
        """
        scope: Scope | None = self
        while scope is not None:
            if name in scope._bindings:
                return scope._bindings[name]
            scope = scope.parent
        raise UnknownIdentifierError(name)

    def set(self, name: str, value: "Value") -> None:
        """Bind a name in this (innermost) scope."""
        self._bindings[name] = value

    def child(self) -> "Scope":
        return Scope(parent=self)

    def __contains__(self, name: str) -> bool:
        try:
            self.get(name)
        except UnknownIdentifierError:
            return False
        return True

    def __repr__(self) -> str:
        return f"Scope({sorted(self._bindings)!r}, parent={self.parent!r})"
