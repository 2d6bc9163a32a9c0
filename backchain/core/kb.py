"""
The knowledge base: an ordered list of facts and an ordered list of rules.

Order matters. The prover tries facts first, in order, then rules, in
order, and stops at the first proof -- so reordering the knowledge base
can change which answer is found, or whether one is found at all.
"""

from dataclasses import dataclass, field

from .terms import Literal, Rule


@dataclass
class KnowledgeBase:
    facts: list = field(default_factory=list)
    rules: list = field(default_factory=list)

    def tell_fact(self, fact: Literal):
        if not isinstance(fact, Literal):
            raise TypeError(f"facts must be Literals, got {fact!r}")
        self.facts.append(fact)

    def tell_rule(self, rule: Rule):
        if not isinstance(rule, Rule):
            raise TypeError(f"rules must be Rules, got {rule!r}")
        self.rules.append(rule)

    def rules_for(self, predicate: str):
        """Rules whose consequent uses predicate, in knowledge-base order."""
        for rule in self.rules:
            if rule.consequent.predicate == predicate:
                yield rule

    def predicates(self) -> set:
        names = {f.predicate for f in self.facts}
        names.update(r.consequent.predicate for r in self.rules)
        return names

    def __len__(self):
        return len(self.facts) + len(self.rules)

    def __repr__(self):
        return f"KnowledgeBase({len(self.facts)} facts, {len(self.rules)} rules)"
