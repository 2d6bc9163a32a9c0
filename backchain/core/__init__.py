from .terms import (
    Constant, Variable, Compound, Literal, Rule,
    is_constant, is_variable, is_compound, term_variables, occurs_in,
)
from .bindings import BindingList, EMPTY
from .unification import (
    unify, unify_terms, unify_literals, unify_term_lists, standardize_apart,
)
from .kb import KnowledgeBase

__all__ = [
    "Constant", "Variable", "Compound", "Literal", "Rule",
    "is_constant", "is_variable", "is_compound", "term_variables", "occurs_in",
    "BindingList", "EMPTY",
    "unify", "unify_terms", "unify_literals", "unify_term_lists", "standardize_apart",
    "KnowledgeBase",
]
