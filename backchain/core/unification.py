"""
Robinson unification with occurs check, over binding lists.

Given two terms (or two literals, or two ordered term lists) and the
bindings already in force, find the most general extension of those
bindings that makes them identical -- or report that none exists.

Failure is None. Success is a BindingList; the incoming list is never
modified, so a caller can try alternatives from the same starting point.
"""

import itertools
from collections.abc import Sequence

from .bindings import BindingList, EMPTY
from .terms import (
    Variable, Compound, Literal, Rule,
    is_variable, is_compound, occurs_in,
)


def unify_terms(t1, t2, bindings: BindingList = EMPTY):
    """
    Unify two terms under bindings.

    Both sides are dereferenced first, so a bound variable is treated as
    the term it is bound to. Returns the extended BindingList, or None.
    """
    if bindings is None:
        return None

    t1 = bindings.walk(t1)
    t2 = bindings.walk(t2)

    if t1 == t2:
        return bindings

    if is_variable(t1):
        return _bind(t1, t2, bindings)

    if is_variable(t2):
        return _bind(t2, t1, bindings)

    if is_compound(t1) and is_compound(t2):
        if t1.functor != t2.functor or t1.arity != t2.arity:
            return None  # different functor or arity
        return unify_term_lists(t1.args, t2.args, bindings)

    return None  # two different constants, or constant vs compound


def _bind(variable: Variable, term, bindings: BindingList):
    # variable is unbound here: unify_terms has already walked it.
    if is_compound(term) and occurs_in(variable, term, bindings):
        return None  # occurs check: X unify f(X) is unsound
    return bindings.extend(variable, term)


def unify_term_lists(ts1, ts2, bindings: BindingList = EMPTY):
    """
    Unify two ordered term sequences pairwise, left to right.

    The bindings from each pair are threaded into the next. Sequences of
    different length never unify.
    """
    if bindings is None:
        return None
    if len(ts1) != len(ts2):
        return None
    for a1, a2 in zip(ts1, ts2):
        bindings = unify_terms(a1, a2, bindings)
        if bindings is None:
            return None
    return bindings


def unify_literals(lit1: Literal, lit2: Literal, bindings: BindingList = EMPTY):
    """
    Unify two literals. Same predicate and arity required.
    Returns bindings or None.
    """
    if lit1.predicate != lit2.predicate:
        return None
    if lit1.arity != lit2.arity:
        return None
    return unify_term_lists(lit1.args, lit2.args, bindings)


def unify(x, y, bindings: BindingList = EMPTY):
    """Unify two literals, two term sequences, or two terms."""
    if isinstance(x, Literal) and isinstance(y, Literal):
        return unify_literals(x, y, bindings)
    if isinstance(x, Literal) or isinstance(y, Literal):
        return None
    if _is_term_sequence(x) and _is_term_sequence(y):
        return unify_term_lists(x, y, bindings)
    return unify_terms(x, y, bindings)


def _is_term_sequence(x) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, str)


# Shared by every rule attempt in the process, so two renamings of the
# same rule never hand out the same variable.
_fresh_indices = itertools.count(1)


def standardize_apart(rule):
    """
    Rename every variable in a rule (or a lone literal) to a fresh one.

    The same source variable maps to the same fresh variable throughout
    this one copy. Call once per rule attempt: separate attempts at the
    same rule must not share variables.
    """
    index = next(_fresh_indices)
    var_map = {}

    def rename(term):
        if is_variable(term):
            if term not in var_map:
                var_map[term] = Variable(term.name, index)
            return var_map[term]
        if is_compound(term):
            return Compound(term.functor, tuple(rename(arg) for arg in term.args))
        return term

    def rename_literal(literal):
        return Literal(literal.predicate, tuple(rename(arg) for arg in literal.args))

    if isinstance(rule, Literal):
        return rename_literal(rule)
    return Rule(
        consequent=rename_literal(rule.consequent),
        antecedents=tuple(rename_literal(a) for a in rule.antecedents),
    )
