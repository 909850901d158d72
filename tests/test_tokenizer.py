import pytest

from exprcalc.tokenizer import MAX_NUMBER_DIGITS, LexError, Token, TokenKind, tokenize, untokenize


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("", []),
        pytest.param("7", [Token(TokenKind.NUMBER, 7, 0)]),
        pytest.param("007", [Token(TokenKind.NUMBER, 7, 0)]),
        pytest.param(
            "12+3",
            [
                Token(TokenKind.NUMBER, 12, 0),
                Token(TokenKind.OPERATOR, "+", 2),
                Token(TokenKind.NUMBER, 3, 3),
            ],
        ),
        pytest.param(
            "(1)",
            [
                Token(TokenKind.LEFT_PAREN, None, 0),
                Token(TokenKind.NUMBER, 1, 1),
                Token(TokenKind.RIGHT_PAREN, None, 2),
            ],
        ),
        pytest.param(
            "  2 +  3 ",
            [
                Token(TokenKind.NUMBER, 2, 2),
                Token(TokenKind.OPERATOR, "+", 4),
                Token(TokenKind.NUMBER, 3, 7),
            ],
        ),
        pytest.param(
            "4-3*2/1",
            [
                Token(TokenKind.NUMBER, 4, 0),
                Token(TokenKind.OPERATOR, "-", 1),
                Token(TokenKind.NUMBER, 3, 2),
                Token(TokenKind.OPERATOR, "*", 3),
                Token(TokenKind.NUMBER, 2, 4),
                Token(TokenKind.OPERATOR, "/", 5),
                Token(TokenKind.NUMBER, 1, 6),
            ],
        ),
        # no grammar check at this stage
        pytest.param(
            "2 2",
            [
                Token(TokenKind.NUMBER, 2, 0),
                Token(TokenKind.NUMBER, 2, 2),
            ],
        ),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("2&3", 1),
        pytest.param("x", 0),
        pytest.param("1.5", 1),
        pytest.param("1\t+ 2", 1),
        pytest.param("1 +\n2", 3),
        pytest.param("2^3", 1),
        pytest.param("²", 0),  # superscript two
        pytest.param("٣", 0),  # arabic-indic digit three
    ],
)
def test_tokenize_invalid_character(code: str, error_char_idx: int) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_char_idx
    assert exc_info.value.text == code


def test_lex_error_str() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("2&3")
    assert str(exc_info.value) == "[Tokenizer error] Unexpected character: '&'\n2&3\n ^"


def test_lex_error_str_long_input() -> None:
    code = "1 + " * 10 + "?" + " + 1" * 10
    with pytest.raises(LexError) as exc_info:
        tokenize(code)
    lines = str(exc_info.value).splitlines()
    assert lines[1].startswith("...") and lines[1].endswith("...")
    assert lines[1][len(lines[2]) - 1] == "?"


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("1+2", "1 + 2"),
        pytest.param("(1+2)*3", "(1 + 2) * 3"),
        pytest.param("((4))", "((4))"),
        pytest.param("  10 /   5", "10 / 5"),
    ],
)
def test_untokenize(code: str, expected: str) -> None:
    assert untokenize(tokenize(code)) == expected


def test_tokenize_longest_number() -> None:
    code = "9" * MAX_NUMBER_DIGITS
    assert tokenize(code) == [Token(TokenKind.NUMBER, int(code), 0)]


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("1" * (MAX_NUMBER_DIGITS + 1), 0),
        pytest.param("2 + " + "1" * 5000, 4),
    ],
)
def test_tokenize_number_too_long(code: str, error_char_idx: int) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(code)
    assert exc_info.value.errmsg.startswith("Number literal longer than")
    assert exc_info.value.error_char_idx == error_char_idx
