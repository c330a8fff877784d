import io

import pytest

from loxlang.errors import ErrorReporter
from loxlang.scanner import KEYWORDS, Scanner
from loxlang.tokens import TokenType as T


def scan(source):
    out = io.StringIO()
    reporter = ErrorReporter(out)
    tokens = Scanner(source, reporter).scan_tokens()
    return tokens, reporter, out.getvalue()


def kinds(tokens):
    return [t.type for t in tokens]


def test_single_characters():
    tokens, reporter, _ = scan("(){},-+;*")
    assert kinds(tokens) == [
        T.LEFT_PAREN, T.RIGHT_PAREN, T.LEFT_BRACE, T.RIGHT_BRACE,
        T.COMMA, T.MINUS, T.PLUS, T.SEMICOLON, T.STAR, T.ENDOFFILE,
    ]
    assert not reporter.had_error


def test_one_or_two_character_operators():
    tokens, _, _ = scan("! != = == < <= > >=")
    assert kinds(tokens) == [
        T.BANG, T.BANG_EQUAL, T.EQUAL, T.EQUAL_EQUAL,
        T.LESS, T.LESS_EQUAL, T.GREATER, T.GREATER_EQUAL, T.ENDOFFILE,
    ]
    assert [t.lexeme for t in tokens[:-1]] == "! != = == < <= > >=".split()


def test_keywords_are_recognised():
    source = " ".join(KEYWORDS)
    tokens, _, _ = scan(source)
    assert kinds(tokens)[:-1] == list(KEYWORDS.values())


def test_fun_is_an_identifier():
    tokens, _, _ = scan("fun")
    assert tokens[0].type is T.IDENTIFIER


def test_identifier_lexeme():
    tokens, _, _ = scan("foo_bar1 _x")
    assert [(t.type, t.lexeme) for t in tokens[:-1]] == [
        (T.IDENTIFIER, "foo_bar1"),
        (T.IDENTIFIER, "_x"),
    ]


def test_number_literals():
    tokens, _, _ = scan("123.45 7")
    assert [(t.lexeme, t.literal) for t in tokens[:-1]] == [
        ("123.45", 123.45),
        ("7", 7.0),
    ]
    assert all(isinstance(t.literal, float) for t in tokens[:-1])


def test_leading_dot_number():
    tokens, _, _ = scan(".5")
    assert tokens[0].type is T.NUMBER
    assert tokens[0].lexeme == ".5"
    assert tokens[0].literal == 0.5


def test_trailing_dot_is_separate():
    tokens, _, _ = scan("1.")
    assert kinds(tokens) == [T.NUMBER, T.DOT, T.ENDOFFILE]
    assert tokens[0].literal == 1.0


def test_string_literal():
    tokens, _, _ = scan('"hi"')
    assert tokens[0].type is T.STRING
    assert tokens[0].lexeme == '"hi"'
    assert tokens[0].literal == "hi"


def test_multiline_string_counts_lines():
    tokens, _, _ = scan('"a\nb" x')
    assert tokens[0].literal == "a\nb"
    assert tokens[1].lexeme == "x"
    assert tokens[1].line == 2


def test_unterminated_string_reports():
    tokens, reporter, out = scan('"abc')
    assert reporter.had_error
    assert "Unterminated String" in out
    assert kinds(tokens) == [T.ENDOFFILE]


def test_unexpected_character_reports_and_continues():
    tokens, reporter, out = scan("@ 1")
    assert reporter.had_error
    assert "Unexpected character." in out
    assert kinds(tokens) == [T.NUMBER, T.ENDOFFILE]


def test_line_comment():
    tokens, _, _ = scan("// hi\n1")
    assert kinds(tokens) == [T.NUMBER, T.ENDOFFILE]
    assert tokens[0].line == 2


def test_block_comment():
    tokens, _, _ = scan("/* c \n */ 2")
    assert kinds(tokens) == [T.NUMBER, T.ENDOFFILE]
    assert tokens[0].literal == 2.0
    assert tokens[0].line == 2


def test_empty_block_comment_swallows_rest():
    tokens, _, _ = scan("/**/ 3")
    assert kinds(tokens) == [T.ENDOFFILE]


def test_slash_operator():
    tokens, _, _ = scan("4 / 2")
    assert kinds(tokens) == [T.NUMBER, T.SLASH, T.NUMBER, T.ENDOFFILE]


@pytest.mark.parametrize("source", ["", "   \t\r", "\n\n", "print 1;"])
def test_ends_with_eof(source):
    tokens, _, _ = scan(source)
    assert tokens[-1].type is T.ENDOFFILE
    assert tokens[-1].lexeme == ""
    assert tokens[-1].line == source.count("\n") + 1


def test_rescanning_gives_same_tokens():
    scanner = Scanner("print 1 + 2;", ErrorReporter(io.StringIO()))
    first = scanner.scan_tokens()
    second = scanner.scan_tokens()
    assert first == second