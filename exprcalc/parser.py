from dataclasses import dataclass

from exprcalc.tokenizer import Token, TokenKind, untokenize
from exprcalc.utils import CalcError, PrintableEnum, caret_lines


@dataclass
class CalcSyntaxError(CalcError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        code = untokenize(self.tokens)
        if self.error_token_idx < len(self.tokens):
            parsed = untokenize(self.tokens[: self.error_token_idx + 1])
            caret_idx = len(parsed) - len(self.tokens[self.error_token_idx].lexeme)
        else:
            caret_idx = len(code) + (1 if self.tokens else 0)
        return caret_lines(f"[Parser error] {self.errmsg}", code, caret_idx)


class BinaryOperator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class PrecedenceLevel(PrintableEnum):
    ADDITIVE = 1
    MULTIPLICATIVE = 2


@dataclass(frozen=True)
class NumberNode:
    value: int


@dataclass(frozen=True)
class BinaryNode:
    operator: BinaryOperator
    left: "Node"
    right: "Node"
    level: PrecedenceLevel


Node = NumberNode | BinaryNode


LEVEL_OPERATORS = {
    PrecedenceLevel.ADDITIVE: (BinaryOperator.ADD, BinaryOperator.SUB),
    PrecedenceLevel.MULTIPLICATIVE: (BinaryOperator.MUL, BinaryOperator.DIV),
}


def parse(tokens: list[Token]) -> Node:
    try:
        node, i = _consume_expression(tokens, 0)
    except RecursionError:
        # only parentheses recurse, operator chains are folded in a loop
        raise CalcSyntaxError("Parentheses nested too deeply", tokens=tokens, error_token_idx=0) from None
    if i < len(tokens):
        raise CalcSyntaxError("Trailing input", tokens=tokens, error_token_idx=i)
    return node


def _peek_operator(tokens: list[Token], i: int, level: PrecedenceLevel) -> BinaryOperator | None:
    if i >= len(tokens) or tokens[i].kind is not TokenKind.OPERATOR:
        return None
    operator = BinaryOperator(tokens[i].value)
    return operator if operator in LEVEL_OPERATORS[level] else None


def _consume_expression(tokens: list[Token], i: int) -> tuple[Node, int]:
    result, i = _consume_term(tokens, i)
    while True:
        operator = _peek_operator(tokens, i, PrecedenceLevel.ADDITIVE)
        if operator is None:
            break
        right, i = _consume_term(tokens, i + 1)
        result = BinaryNode(operator=operator, left=result, right=right, level=PrecedenceLevel.ADDITIVE)
    return result, i


def _consume_term(tokens: list[Token], i: int) -> tuple[Node, int]:
    result, i = _consume_factor(tokens, i)
    while True:
        operator = _peek_operator(tokens, i, PrecedenceLevel.MULTIPLICATIVE)
        if operator is None:
            break
        right, i = _consume_factor(tokens, i + 1)
        result = BinaryNode(operator=operator, left=result, right=right, level=PrecedenceLevel.MULTIPLICATIVE)
    return result, i


def _consume_factor(tokens: list[Token], i: int) -> tuple[Node, int]:
    if i >= len(tokens):
        raise CalcSyntaxError(
            "Expected number or parenthesis, found end of input", tokens=tokens, error_token_idx=i
        )
    first = tokens[i]
    if first.kind is TokenKind.NUMBER:
        return NumberNode(first.value), i + 1  # type: ignore
    elif first.kind is TokenKind.LEFT_PAREN:
        inner, i = _consume_expression(tokens, i + 1)
        if i >= len(tokens) or tokens[i].kind is not TokenKind.RIGHT_PAREN:
            raise CalcSyntaxError("Unclosed parenthesis", tokens=tokens, error_token_idx=i)
        return inner, i + 1
    else:
        raise CalcSyntaxError(
            f"Expected number or parenthesis, found {first.kind}", tokens=tokens, error_token_idx=i
        )
