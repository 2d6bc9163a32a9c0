"""
Binding lists: the substitutions threaded through a proof.

A BindingList is an ordered, append-only sequence of (variable, term)
pairs. Looking a variable up returns the most recently added binding
for it. Extending a list returns a new list and leaves the old one
untouched, so two proof branches grown from the same base never see
each other's bindings.

Absence of a binding is a lookup miss (None), never a marker stored in
a term.
"""

from dataclasses import dataclass
from typing import Optional

from .terms import Variable, Compound, Literal, is_variable, is_compound


@dataclass(frozen=True)
class BindingList:
    bindings: tuple = ()

    def bound_value(self, variable: Variable) -> Optional[object]:
        """The latest term bound to variable, or None if it is unbound."""
        for bound_var, term in reversed(self.bindings):
            if bound_var == variable:
                return term
        return None

    def is_bound(self, variable: Variable) -> bool:
        return self.bound_value(variable) is not None

    def extend(self, variable: Variable, term) -> "BindingList":
        """A new list with variable -> term appended. Self is not modified."""
        if not is_variable(variable):
            raise TypeError(f"only variables can be bound, got {variable!r}")
        return BindingList(self.bindings + ((variable, term),))

    def walk(self, term):
        """Follow variable bindings until an unbound variable or a non-variable."""
        while is_variable(term):
            value = self.bound_value(term)
            if value is None:
                return term
            term = value
        return term

    def substitute(self, term):
        """Apply every binding, recursively, to term."""
        term = self.walk(term)
        if is_compound(term):
            return Compound(term.functor, tuple(self.substitute(a) for a in term.args))
        return term

    def substitute_literal(self, literal: Literal) -> Literal:
        return Literal(literal.predicate, tuple(self.substitute(a) for a in literal.args))

    def variables(self) -> list:
        """Bound variables in the order they were first bound."""
        seen = []
        for bound_var, _ in self.bindings:
            if bound_var not in seen:
                seen.append(bound_var)
        return seen

    def as_dict(self) -> dict:
        """{variable: fully substituted value} for every bound variable."""
        return {v: self.substitute(v) for v in self.variables()}

    def __len__(self):
        return len(self.bindings)

    def __bool__(self):
        # An empty list is still a successful proof; failure is None.
        return True

    def __iter__(self):
        return iter(self.bindings)

    def __contains__(self, variable):
        return self.bound_value(variable) is not None

    def __repr__(self):
        pairs = ", ".join(f"{v}: {t}" for v, t in self.bindings)
        return f"BindingList({{{pairs}}})"


EMPTY = BindingList()
