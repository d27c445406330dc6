import pytest

from rdfsnips.scanner import iter_events, iter_statements


def test_statements_split_on_dots():
    text = "<a> <b> <c> .\n  <d> <e> <f> ."
    assert list(iter_statements(text)) == ["<a> <b> <c> .", "<d> <e> <f> ."]


def test_dots_inside_iris_and_literals_do_not_end_statement():
    text = '<http://x.org/a> <p> "1.5" .'
    assert list(iter_statements(text)) == [text]


def test_comment_with_dot_is_part_of_statement():
    text = "# note. here\n<a> <b> <c> ."
    assert list(iter_statements(text)) == [text]


def test_long_quotes():
    text = '<s> <p> """a . "b""" .'
    assert list(iter_statements(text)) == [text]


def test_escaped_quote_stays_in_literal():
    text = '<s> <p> "a\\".b" .'
    assert list(iter_statements(text)) == [text]


def test_empty_literal():
    text = '<s> <p> "" . <t> <q> <r> .'
    assert list(iter_statements(text)) == ['<s> <p> "" .', "<t> <q> <r> ."]


def test_incomplete_tail_is_dropped():
    text = "<a> <b> <c> . <d> <e>"
    assert list(iter_statements(text)) == ["<a> <b> <c> ."]


def test_quote_at_very_end_stops_scanning():
    text = '<a> <b> <c> . <d> <e> "'
    assert list(iter_statements(text)) == ["<a> <b> <c> ."]


def test_scanning_stops_at_nul():
    text = "<a> <b> <c> .\0<d> <e> <f> ."
    assert list(iter_statements(text)) == ["<a> <b> <c> ."]


def test_directive_is_a_statement():
    text = "@prefix ex: <http://example.com/> .\nex:a ex:b ex:c ."
    statements = list(iter_statements(text))
    assert len(statements) == 2
    assert statements[0].startswith("@prefix")
    assert statements[1] == "ex:a ex:b ex:c ."


def test_events_report_marks_outside_literals():
    text = '<s> <p> <o1>, <o2> ; <q> "x,y;z" .'
    events = list(iter_events(text, ",;"))
    assert [mark for mark, _, _ in events] == [",", ";", "."]
    assert {start for _, start, _ in events} == {0}
    assert events[-1][2] == len(text)


def test_events_without_marks_report_only_statement_ends():
    text = "  <a> <b> <c> .  <d> <e> <f> ."
    events = list(iter_events(text))
    assert [mark for mark, _, _ in events] == [".", "."]
    assert [start for _, start, _ in events] == [text.index("<a>"), text.index("<d>")]


@pytest.mark.parametrize(
    "text",
    [
        "<a> <b> <c> . <d> <e> <f> .",
        '<s> <p> "q.x" ; <p2> <o> .\n# c.\n<x> <y> <z> .',
        "",
    ],
)
def test_every_statement_ends_with_dot(text):
    statements = list(iter_statements(text))
    assert all(stmt.endswith(".") for stmt in statements)
    assert all(stmt in text for stmt in statements)