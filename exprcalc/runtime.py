import math
import operator
from dataclasses import dataclass
from typing import Callable

from exprcalc.parser import BinaryNode, BinaryOperator, Node, NumberNode
from exprcalc.utils import CalcError

Number = int | float


@dataclass
class CalcArithmeticError(CalcError, ArithmeticError):
    errmsg: str

    def __str__(self) -> str:
        return f"[Arithmetic error] {self.errmsg}"


def evaluate(node: Node) -> Number:
    """Post-order walk with explicit stacks, so long operator chains don't hit the recursion limit"""
    results: list[Number] = []
    pending: list[tuple[Node, bool]] = [(node, False)]
    while pending:
        current, children_evaluated = pending.pop()
        match current:
            case NumberNode(value=value):
                results.append(value)
            case BinaryNode(operator=op, left=left, right=right):
                if children_evaluated:
                    right_res = results.pop()
                    left_res = results.pop()
                    results.append(eval_binary_operation(op, left_res, right_res))
                else:
                    # left is popped, and so evaluated, before right
                    pending.append((current, True))
                    pending.append((right, False))
                    pending.append((left, False))
            case _:
                raise TypeError(f"Unexpected node type: {type(current).__name__}")
    return results.pop()


def eval_binary_operation(op: BinaryOperator, a: Number, b: Number) -> Number:
    impl = binary_impls[op]
    try:
        result = impl(a, b)
    except OverflowError as e:
        raise CalcArithmeticError(f"Result of {op} is too large to represent") from e
    if isinstance(result, float) and not math.isfinite(result):
        raise CalcArithmeticError(f"Result of {op} is too large to represent")
    return result


def _divide(a: Number, b: Number) -> Number:
    if b == 0:
        raise CalcArithmeticError("Division by zero")
    # true division, 7 / 2 == 3.5
    return a / b


binary_impls: dict[BinaryOperator, Callable[[Number, Number], Number]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: _divide,
}
