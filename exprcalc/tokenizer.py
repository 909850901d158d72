import enum
import re
import string
from dataclasses import dataclass

from exprcalc.utils import CalcError, PrintableEnum, caret_lines


@dataclass
class LexError(CalcError):
    errmsg: str
    text: str
    error_char_idx: int

    def __str__(self) -> str:
        return caret_lines(f"[Tokenizer error] {self.errmsg}", self.text, self.error_char_idx)


class TokenKind(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: int | str | None = None
    position: int = 0

    @property
    def lexeme(self) -> str:
        if self.kind is TokenKind.LEFT_PAREN:
            return "("
        elif self.kind is TokenKind.RIGHT_PAREN:
            return ")"
        return str(self.value)

    def __str__(self) -> str:
        return f"<{self.kind}>{self.lexeme}"


# str.isdigit() also accepts things like "²" and non-ASCII decimal digits
DIGITS = frozenset(string.digits)

OPERATORS = frozenset("+-*/")

# CPython refuses longer int <-> str conversions by default
MAX_NUMBER_DIGITS = 4300

PARENS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


def tokenize(text: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(text):
        char = text[i]
        if char in DIGITS:
            number_end_idx = i + 1
            while number_end_idx < len(text) and text[number_end_idx] in DIGITS:
                number_end_idx += 1
            if number_end_idx - i > MAX_NUMBER_DIGITS:
                raise LexError(
                    f"Number literal longer than {MAX_NUMBER_DIGITS} digits", text=text, error_char_idx=i
                )
            tokens.append(Token(kind=TokenKind.NUMBER, value=int(text[i:number_end_idx]), position=i))
            i = number_end_idx
            continue
        elif char in OPERATORS:
            tokens.append(Token(kind=TokenKind.OPERATOR, value=char, position=i))
        elif char in PARENS:
            tokens.append(Token(kind=PARENS[char], position=i))
        elif char == " ":
            pass
        else:
            raise LexError(f"Unexpected character: {char!r}", text=text, error_char_idx=i)
        i += 1
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
