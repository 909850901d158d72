"""Differential fuzzing of exprcalc against Python's eval, to be run from project root"""
import argparse
import logging
import math
import random
import re
import string
import warnings

from exprcalc.calculator import evaluate_expression
from exprcalc.utils import CalcError

logger = logging.getLogger("fuzz_arithmetic")

ALPHABET = string.digits + "()+-*/ "


def eval_py(code: str) -> object:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate_expression(code)
    except CalcError as e:
        return str(e)


def generate(length: int) -> str:
    return "".join(random.choices(ALPHABET, k=length))


# python also accepts unary plus/minus, this calculator does not
UNARY_OPERATOR_PATT = re.compile(r"(^|[-+*/(])\s*[-+]")


def is_mismatch(code: str, res_py: object, res_my: float | str) -> bool:
    # eval can also produce non-numbers, e.g. "()" is an empty tuple
    py_ok = isinstance(res_py, (int, float))
    my_ok = not isinstance(res_my, str)
    if not py_ok and not my_ok:
        return False
    if my_ok and not py_ok:
        return not (isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals"))
    if py_ok and not my_ok:
        return UNARY_OPERATOR_PATT.search(code) is None
    return not math.isclose(float(res_my), float(res_py))  # type: ignore


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument("--iterations", type=int, default=100_000)
    arg_parser.add_argument("--length", type=int, default=10)
    arg_parser.add_argument("--seed", type=int, default=None)
    args = arg_parser.parse_args()

    warnings.filterwarnings("ignore")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    random.seed(args.seed)

    mismatches = 0
    for _ in range(args.iterations):
        code = generate(args.length)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if is_mismatch(code, res_py, res_my):
            mismatches += 1
            logger.warning("%r\npy: %s\nmy: %s", code, res_py, res_my)

    logger.info("%d iterations, %d mismatches", args.iterations, mismatches)
