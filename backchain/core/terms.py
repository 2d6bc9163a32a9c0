"""
Core data structures: terms, literals, rules.

These are the atoms of the whole system. Nothing in here depends on
substitutions, unification, or search.

Terms:
    Constant("tom")                           -> tom
    Variable("X")                             -> X
    Variable("X", 3)                          -> X_3  (a standardized-apart copy)
    Compound("s", (Constant("0"),))           -> s(0)

    Literal("parent", (Constant("tom"), Variable("X")))  -> parent(tom, X)
    Rule(head, (body1, body2))                            -> head :- body1, body2

All of them are frozen: a term never carries a binding. Bindings live
only in a BindingList.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Constant:
    """An atomic symbol. Two constants are the same iff their values are."""
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Variable:
    """
    A logic variable.

    Identity is (name, index). Variables read from text have index 0;
    standardize_apart hands out fresh indices, so a renamed variable can
    never collide with one the user wrote.
    """
    name: str
    index: int = 0

    def __str__(self):
        if self.index:
            return f"{self.name}_{self.index}"
        return self.name


@dataclass(frozen=True)
class Compound:
    """A functor applied to an ordered tuple of argument terms."""
    functor: str
    args: tuple = ()

    @property
    def arity(self) -> int:
        return len(self.args)

    def __str__(self):
        return f"{self.functor}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class Literal:
    """A predicate symbol applied to an ordered tuple of terms."""
    predicate: str
    args: tuple = ()

    @property
    def arity(self) -> int:
        return len(self.args)

    def variables(self) -> list:
        found = []
        for arg in self.args:
            _collect_variables(arg, found)
        return found

    def __str__(self):
        if not self.args:
            return self.predicate
        return f"{self.predicate}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class Rule:
    """
    A Horn clause: consequent :- antecedent_1, ..., antecedent_n.

    An empty body is allowed; such a rule behaves like a fact that is
    only reached after the fact list has been exhausted.
    """
    consequent: Literal
    antecedents: tuple = ()

    def variables(self) -> list:
        """Every distinct variable in head and body, in first-seen order."""
        found = self.consequent.variables()
        for antecedent in self.antecedents:
            for v in antecedent.variables():
                if v not in found:
                    found.append(v)
        return found

    def __str__(self):
        if not self.antecedents:
            return f"{self.consequent}."
        body = ", ".join(str(a) for a in self.antecedents)
        return f"{self.consequent} :- {body}."


def is_constant(term) -> bool:
    return isinstance(term, Constant)


def is_variable(term) -> bool:
    return isinstance(term, Variable)


def is_compound(term) -> bool:
    return isinstance(term, Compound)


def _collect_variables(term, found: list):
    if is_variable(term):
        if term not in found:
            found.append(term)
    elif is_compound(term):
        for arg in term.args:
            _collect_variables(arg, found)


def term_variables(term) -> list:
    """Distinct variables of a term, in left-to-right order."""
    found = []
    _collect_variables(term, found)
    return found


def occurs_in(variable: Variable, term, bindings=None) -> bool:
    """
    Does variable occur anywhere in term? Prevents cyclic bindings.

    When bindings are given, bound variables inside term are followed,
    so X is found in f(Y) under {Y: g(X)}.
    """
    if bindings is not None:
        term = bindings.walk(term)
    if term == variable:
        return True
    if is_compound(term):
        return any(occurs_in(variable, arg, bindings) for arg in term.args)
    return False


def const(value) -> Constant:
    return Constant(str(value))


def var(name: str) -> Variable:
    return Variable(name)


def fn(functor: str, *args) -> Compound:
    return Compound(functor, tuple(args))


def lit(predicate: str, *args) -> Literal:
    return Literal(predicate, tuple(args))
