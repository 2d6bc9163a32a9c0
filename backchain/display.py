"""
Turning proofs back into text.

The prover returns the whole binding list of a proof, renamed rule
variables included. query_answers() picks out what the user actually
asked about; format_bindings() shows everything, in binding order.
"""

from typing import Optional

from .core.bindings import BindingList
from .core.terms import Literal, is_variable


def query_variables(query) -> list:
    """Distinct user variables of a literal or list of literals, in order."""
    if isinstance(query, Literal):
        query = [query]
    found = []
    for literal in query:
        for v in literal.variables():
            if v not in found:
                found.append(v)
    return found


def query_answers(query, bindings: BindingList) -> dict:
    """{variable name: substituted value} for each variable in query."""
    return {str(v): bindings.substitute(v) for v in query_variables(query)}


def format_bindings(bindings: Optional[BindingList]) -> str:
    if bindings is None:
        return "no"
    if not len(bindings):
        return "{}"
    return "{" + ", ".join(f"{v}/{t}" for v, t in bindings) + "}"


def format_answer(query, bindings: Optional[BindingList], show_all: bool = False) -> str:
    if bindings is None:
        return "no"
    lines = ["yes"]
    for name, value in query_answers(query, bindings).items():
        if is_variable(value):
            lines.append(f"  {name} = _")
        else:
            lines.append(f"  {name} = {value}")
    if show_all:
        lines.append(f"  bindings: {format_bindings(bindings)}")
    return "\n".join(lines)


def print_answer(query, bindings: Optional[BindingList], show_all: bool = False):
    print(format_answer(query, bindings, show_all))
