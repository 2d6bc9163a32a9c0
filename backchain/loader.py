"""
Reading knowledge bases and queries from text.

Format (Prolog-like):

    % comments run to end of line ('#' works too)
    parent(tom, bob).
    raining.
    ancestor(X, Y) :- parent(X, Y).
    ancestor(X, Y) :- parent(X, Z),
                      ancestor(Z, Y).

    Identifiers starting with an uppercase letter or '_' are variables.
    Other identifiers and integers are constants.
    name(arg, ...) is a compound term inside an argument list, and a
    literal at clause level. Every clause ends with '.'.

Anything malformed raises ParseError; nothing partial is returned.
"""

import logging
import re

from .core.kb import KnowledgeBase
from .core.terms import Constant, Variable, Compound, Literal, Rule
from .errors import KnowledgeBaseError, ParseError

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(r"""
    (?P<space>\s+)
  | (?P<comment>[%\#][^\n]*)
  | (?P<neck>:-)
  | (?P<query>\?-)
  | (?P<name>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<number>-?\d+)
  | (?P<punct>[(),.])
""", re.VERBOSE)


def tokenize(text: str, source: str = "<string>") -> list:
    """Split text into (kind, value, line) tokens, dropping space and comments."""
    tokens = []
    line = 1
    pos = 0
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if m is None:
            raise ParseError(f"unexpected character {text[pos]!r}", source, line)
        kind = m.lastgroup
        value = m.group()
        if kind == "punct":
            kind = value
        if kind not in ("space", "comment"):
            tokens.append((kind, value, line))
        line += value.count("\n")
        pos = m.end()
    return tokens


class _Parser:
    # Recursive descent over the token list from tokenize().

    def __init__(self, text: str, source: str):
        self.source = source
        self.tokens = tokenize(text, source)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self):
        if self.at_end():
            return None
        return self.tokens[self.pos][0]

    def line(self) -> int:
        if self.at_end():
            return self.tokens[-1][2] if self.tokens else 1
        return self.tokens[self.pos][2]

    def error(self, message: str):
        return ParseError(message, self.source, self.line())

    def expect(self, kind: str) -> str:
        if self.peek() != kind:
            found = "end of input" if self.at_end() else repr(self.tokens[self.pos][1])
            raise self.error(f"expected {kind!r}, found {found}")
        value = self.tokens[self.pos][1]
        self.pos += 1
        return value

    def accept(self, kind: str) -> bool:
        if self.peek() == kind:
            self.pos += 1
            return True
        return False

    def parse_arguments(self) -> tuple:
        args = []
        if self.accept("("):
            if self.accept(")"):
                return ()
            args.append(self.parse_term())
            while self.accept(","):
                args.append(self.parse_term())
            self.expect(")")
        return tuple(args)

    def parse_term(self):
        kind = self.peek()
        if kind == "number":
            return Constant(self.expect("number"))
        if kind != "name":
            found = "end of input" if self.at_end() else repr(self.tokens[self.pos][1])
            raise self.error(f"expected a term, found {found}")
        name = self.expect("name")
        if self.peek() == "(":
            if _is_variable_name(name):
                raise self.error(f"functor {name!r} must not start with an uppercase letter")
            return Compound(name, self.parse_arguments())
        if _is_variable_name(name):
            return Variable(name)
        return Constant(name)

    def parse_literal(self) -> Literal:
        if self.peek() != "name":
            found = "end of input" if self.at_end() else repr(self.tokens[self.pos][1])
            raise self.error(f"expected a predicate, found {found}")
        name = self.expect("name")
        if _is_variable_name(name):
            raise self.error(f"predicate {name!r} must not start with an uppercase letter")
        return Literal(name, self.parse_arguments())

    def parse_conjunction(self) -> list:
        goals = [self.parse_literal()]
        while self.accept(","):
            goals.append(self.parse_literal())
        return goals

    def parse_clause(self):
        """A fact (Literal) or a Rule, including its closing '.'."""
        head = self.parse_literal()
        if self.accept("neck"):
            body = self.parse_conjunction()
            self.expect(".")
            return Rule(head, tuple(body))
        self.expect(".")
        return head


def _is_variable_name(name: str) -> bool:
    return name[0].isupper() or name[0] == "_"


def parse_term(text: str):
    parser = _Parser(text, "<term>")
    term = parser.parse_term()
    if not parser.at_end():
        raise parser.error("unexpected text after term")
    return term


def parse_literal(text: str) -> Literal:
    parser = _Parser(text, "<literal>")
    literal = parser.parse_literal()
    parser.accept(".")
    if not parser.at_end():
        raise parser.error("unexpected text after literal")
    return literal


def parse_query(text: str) -> list:
    """
    Parse a query into a list of goal literals.

    "?- parent(tom, X), parent(X, Y)." -> [parent(tom, X), parent(X, Y)]
    The '?-' prefix and the final '.' are both optional.
    """
    parser = _Parser(text, "<query>")
    if parser.at_end():
        raise parser.error("empty query")
    parser.accept("query")
    try:
        goals = parser.parse_conjunction()
    except RecursionError:
        raise parser.error("terms nested too deeply") from None
    parser.accept(".")
    if not parser.at_end():
        raise parser.error("unexpected text after query")
    return goals


def parse_knowledge_base(text: str, source: str = "<string>", kb: KnowledgeBase = None) -> KnowledgeBase:
    """Parse clauses into kb (a new one by default), keeping their order."""
    if kb is None:
        kb = KnowledgeBase()
    parser = _Parser(text, source)
    clauses = []
    try:
        while not parser.at_end():
            clauses.append(parser.parse_clause())
    except RecursionError:
        raise parser.error("terms nested too deeply") from None
    # Only add once the whole text has parsed.
    for clause in clauses:
        if isinstance(clause, Rule):
            kb.tell_rule(clause)
        else:
            kb.tell_fact(clause)
    return kb


def load_knowledge_base(*paths) -> KnowledgeBase:
    """
    Load one or more files, in order, into a single KnowledgeBase.

    Raises KnowledgeBaseError if any file is missing, unreadable or
    malformed.
    """
    if not paths:
        raise KnowledgeBaseError("no knowledge base files given")
    kb = KnowledgeBase()
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise KnowledgeBaseError(f"cannot read {path}: {e}", context={"path": str(path)}) from e
        staged = parse_knowledge_base(text, source=str(path))
        kb.facts.extend(staged.facts)
        kb.rules.extend(staged.rules)
        logger.info("loaded %s: %d facts, %d rules", path, len(staged.facts), len(staged.rules))
    return kb
