"""
Backchain: a backward-chaining inference engine for Horn clauses.

Knowledge is a list of ground facts and a list of rules. A query is
proved depth first: facts before rules, each in the order given, first
proof wins. The answer is the binding list of that proof, or None.

Usage:
    python -m backchain family.pl -q "ancestor(tom, X)"
    python -m backchain facts.pl rules.pl < queries.txt
"""

from .core.terms import Constant, Variable, Compound, Literal, Rule
from .core.bindings import BindingList, EMPTY
from .core.unification import (
    unify, unify_terms, unify_literals, unify_term_lists, standardize_apart,
)
from .core.kb import KnowledgeBase
from .inference.backward import BackwardChainer, ask
from .loader import (
    parse_term, parse_literal, parse_query,
    parse_knowledge_base, load_knowledge_base,
)
from .display import query_answers, format_bindings, format_answer, print_answer
from .errors import BackchainError, KnowledgeBaseError, ParseError

__all__ = [
    "Constant", "Variable", "Compound", "Literal", "Rule",
    "BindingList", "EMPTY",
    "unify", "unify_terms", "unify_literals", "unify_term_lists", "standardize_apart",
    "KnowledgeBase",
    "BackwardChainer", "ask",
    "parse_term", "parse_literal", "parse_query",
    "parse_knowledge_base", "load_knowledge_base",
    "query_answers", "format_bindings", "format_answer", "print_answer",
    "BackchainError", "KnowledgeBaseError", "ParseError",
]
