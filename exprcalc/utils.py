import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class CalcError(Exception):
    """Base for every error the tokenizer, parser and evaluator raise"""


def caret_lines(header: str, source: str, error_idx: int) -> str:
    """Header, a window of source around error_idx and a caret pointing at it"""
    print_start_idx = max(0, error_idx - 10)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(source), error_idx + 10)
    print_ellipsis_post = print_end_idx < len(source)
    return "\n".join(
        [
            header,
            (
                ("..." if print_ellipsis_pre else "")
                + f"{source[print_start_idx:print_end_idx]}"
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (error_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )
