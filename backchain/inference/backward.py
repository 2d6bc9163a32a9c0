"""
Backward chaining: depth-first SLD resolution over a KnowledgeBase.

To prove a goal literal under some bindings:
    1. Try each fact, in order. The first one that unifies is the answer.
       Other matching facts are never tried -- there is no backtracking
       into the fact list.
    2. Otherwise try each rule whose head has the goal's predicate, in
       order. Standardize it apart, unify the goal with its head, then
       prove its body as a conjunction. The first rule whose body is
       proved is the answer; a rule whose body fails passes the search
       on to the next rule.
    3. Otherwise the goal fails (None).

A conjunction is proved left to right, each goal under the bindings
produced by the one before it.

This is incomplete on purpose: fact order and rule order decide which
proof is found, and a rule that recurses without reaching a fact will
recurse until Python gives up with RecursionError.
"""

import logging
from collections.abc import Sequence
from typing import Optional

from ..core.bindings import BindingList
from ..core.kb import KnowledgeBase
from ..core.terms import Literal
from ..core.unification import unify_literals, standardize_apart

logger = logging.getLogger(__name__)


class BackwardChainer:
    """Answers queries against a knowledge base it never modifies."""

    def __init__(self, kb: KnowledgeBase):
        self.kb = kb

    def ask(self, goal, bindings: Optional[BindingList] = None) -> Optional[BindingList]:
        """
        Prove a literal, or a sequence of literals read as a conjunction.

        Returns the BindingList of the first proof found, including the
        bindings of intermediate (renamed) rule variables, or None.
        """
        if bindings is None:
            bindings = BindingList()
        if isinstance(goal, Literal):
            return self.ask_literal(goal, bindings)
        if isinstance(goal, Sequence) and not isinstance(goal, str):
            goals = list(goal)
            for g in goals:
                if not isinstance(g, Literal):
                    raise TypeError(f"goals must be Literals, got {g!r}")
            return self.ask_conjunction(goals, bindings)
        raise TypeError(f"goal must be a Literal or a sequence of Literals, got {goal!r}")

    def ask_facts(self, literal: Literal, bindings: BindingList, depth: int = 0) -> Optional[BindingList]:
        """The unifier with the first matching fact, or None."""
        for fact in self.kb.facts:
            if fact.variables():
                # Non-ground facts get fresh variables, like rules.
                fact = standardize_apart(fact)
            result = unify_literals(literal, fact, bindings)
            if result is not None:
                _trace(depth, "fact %s matches %s", fact, literal)
                return result
        return None

    def ask_literal(self, goal: Literal, bindings: BindingList, depth: int = 0) -> Optional[BindingList]:
        _trace(depth, "goal %s", goal)
        result = self.ask_facts(goal, bindings, depth)
        if result is not None:
            return result

        for candidate in self.kb.rules_for(goal.predicate):
            rule = standardize_apart(candidate)
            result = unify_literals(goal, rule.consequent, bindings)
            if result is None:
                continue
            _trace(depth, "trying rule %s", rule)
            result = self.ask_conjunction(list(rule.antecedents), result, depth + 1)
            if result is not None:
                _trace(depth, "proved %s by rule %s", goal, candidate)
                return result
            _trace(depth, "rule %s failed for %s", candidate, goal)

        _trace(depth, "no proof for %s", goal)
        return None

    def ask_conjunction(self, goals: list, bindings: BindingList, depth: int = 0) -> Optional[BindingList]:
        """Prove goals left to right. An empty conjunction returns bindings as is."""
        if not goals:
            return bindings
        first = self.ask_literal(goals[0], bindings, depth)
        if first is None:
            return None
        return self.ask_conjunction(goals[1:], first, depth)


def _trace(depth: int, msg, *args):
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("  " * depth + msg, *args)


def ask(kb: KnowledgeBase, goal, bindings: Optional[BindingList] = None) -> Optional[BindingList]:
    """Prove goal against kb with a fresh BackwardChainer."""
    return BackwardChainer(kb).ask(goal, bindings)
