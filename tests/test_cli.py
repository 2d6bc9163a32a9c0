"""
Tests for answer display and the command-line driver.
"""

import io

import pytest

from backchain.__main__ import main
from backchain.core.bindings import EMPTY
from backchain.core.terms import Variable, const, var, fn, lit
from backchain.display import query_variables, query_answers, format_bindings, format_answer
from backchain.loader import parse_knowledge_base, parse_query
from backchain.inference.backward import ask


FAMILY = """\
parent(tom, bob).
parent(bob, ann).
ancestor(X, Y) :- parent(X, Y).
ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y).
"""


@pytest.fixture
def kb_file(tmp_path):
    path = tmp_path / "family.pl"
    path.write_text(FAMILY)
    return str(path)


class TestDisplay:
    def test_query_variables(self):
        X, Y = var("X"), var("Y")
        goals = [lit("p", X, Y), lit("q", Y, X, var("Z"))]
        assert query_variables(goals) == [X, Y, var("Z")]
        assert query_variables(lit("p", X)) == [X]

    def test_answers_hide_renamed_variables(self):
        kb = parse_knowledge_base(FAMILY)
        goals = parse_query("ancestor(tom, Who)")
        result = ask(kb, goals)
        assert query_answers(goals, result) == {"Who": const("bob")}
        # The full binding list also holds the rule's renamed variables.
        assert any(v.index > 0 for v in result.variables())

    def test_format_bindings(self):
        X = var("X")
        assert format_bindings(None) == "no"
        assert format_bindings(EMPTY) == "{}"
        bl = EMPTY.extend(X, fn("s", const(0))).extend(Variable("Y", 2), X)
        assert format_bindings(bl) == "{X/s(0), Y_2/X}"

    def test_format_answer(self):
        X, Y = var("X"), var("Y")
        goals = [lit("p", X, Y)]
        bl = EMPTY.extend(X, const("tom"))
        assert format_answer(goals, None) == "no"
        assert format_answer(goals, bl) == "yes\n  X = tom\n  Y = _"
        assert format_answer([lit("p")], EMPTY) == "yes"
        assert format_answer(goals, bl, show_all=True).endswith("bindings: {X/tom}")


class TestMain:
    def test_query_flag(self, kb_file, capsys):
        assert main([kb_file, "-q", "ancestor(tom, X)", "-q", "ancestor(ann, tom)"]) == 0
        out = capsys.readouterr().out
        assert out == "yes\n  X = bob\nno\n"

    def test_queries_from_stdin(self, kb_file, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("ancestor(tom, ann).\n\n% comment\nparent(X, ann)\n"))
        assert main([kb_file]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "?- ancestor(tom, ann).",
            "yes",
            "?- parent(X, ann)",
            "yes",
            "  X = bob",
        ]

    def test_show_bindings(self, kb_file, capsys):
        main([kb_file, "--bindings", "-q", "parent(tom, X)"])
        assert "bindings: {X/bob}" in capsys.readouterr().out

    def test_missing_kb_fails_before_queries(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.pl"), "-q", "p"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err

    def test_malformed_kb(self, tmp_path, capsys):
        path = tmp_path / "bad.pl"
        path.write_text("parent(tom bob).\n")
        assert main([str(path), "-q", "parent(tom, bob)"]) == 1
        assert "bad.pl:1" in capsys.readouterr().err

    def test_bad_query_reported(self, kb_file, capsys):
        assert main([kb_file, "-q", "parent(tom,", "-q", "parent(tom, bob)"]) == 0
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert captured.out == "yes\n"

    def test_non_terminating_query(self, tmp_path, capsys):
        path = tmp_path / "loop.pl"
        path.write_text("loop(X) :- loop(X).\n")
        assert main([str(path), "-q", "loop(a)"]) == 0
        assert "recursion limit reached" in capsys.readouterr().out

    def test_undecodable_kb_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.pl"
        path.write_bytes(b"parent(tom, \xff\xfe).\n")
        assert main([str(path), "-q", "parent(tom, bob)"]) == 1
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert "latin1.pl" in captured.err
        assert captured.out == ""

    def test_deeply_nested_kb_file(self, tmp_path, capsys):
        path = tmp_path / "deep.pl"
        path.write_text("p(" + "s(" * 20000 + "0" + ")" * 20000 + ").\n")
        assert main([str(path), "-q", "p(0)"]) == 1
        assert "nested too deeply" in capsys.readouterr().err

    def test_deep_query_that_terminates(self, tmp_path, capsys):
        path = tmp_path / "nat.pl"
        path.write_text("nat(0).\nnat(s(X)) :- nat(X).\n")
        query = "nat(" + "s(" * 400 + "0" + ")" * 400 + ")"
        assert main([str(path), "-q", query]) == 0
        assert capsys.readouterr().out == "yes\n"
