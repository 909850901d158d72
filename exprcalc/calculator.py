"""Entry point for calculator front ends: text in, number or error out"""
import logging
from dataclasses import dataclass

from exprcalc.parser import parse
from exprcalc.runtime import Number, evaluate
from exprcalc.tokenizer import tokenize, untokenize
from exprcalc.utils import CalcError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    value: Number


@dataclass(frozen=True)
class Err:
    error: CalcError


EvaluationResult = Ok | Err


def evaluate_expression(text: str) -> Number:
    """Tokenizes, parses and evaluates text

    Raises LexError, CalcSyntaxError or CalcArithmeticError, all subclasses of CalcError.
    """
    tokens = tokenize(text)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%d tokens: %s", len(tokens), untokenize(tokens))
    ast = parse(tokens)
    return evaluate(ast)


def try_evaluate_expression(text: str) -> EvaluationResult:
    """Same as evaluate_expression, but returns Err instead of raising CalcError"""
    try:
        return Ok(evaluate_expression(text))
    except CalcError as e:
        logger.debug("evaluation of %r failed: %s", text, e)
        return Err(e)
