"""
Literal serializers.

Every primitive that ends up in the generated program passes through one of
these functions. They are pure and do not look at the case configuration.
"""

import math, re, typing

from decimal import Decimal

from .       import vocab
from .common import LBCaseException

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def format_decimal(value: float) -> str:
    """
    Shortest round-trip decimal text of a finite float, positional notation,
    without a trailing '.0' (1.0 -> '1', 1e-07 -> '0.0000001').
    """
    text = format(Decimal(repr(float(value))), 'f')
    if text.endswith(".0"):
        text = text[:-2]

    return text


def f64(value: float) -> str:
    value = float(value)

    if math.isnan(value):
        return vocab.F64_NAN
    if math.isinf(value):
        return vocab.F64_INF if value > 0 else vocab.F64_NEG_INF

    return f"{format_decimal(value)}{vocab.F64_SUFFIX}"


def usize(value: int) -> str:
    if isinstance(value, bool) or int(value) != value or value < 0:
        raise LBCaseException(f"Cannot render {value!r} as an unsigned integer literal.")

    return f"{int(value)}{vocab.USIZE_SUFFIX}"


def string(text: str) -> str:
    # Passed through as-is: a stray quote yields broken but still delimited text.
    return f'"{text}"'


def vec(items: typing.Iterable[str]) -> str:
    return f"{vocab.VEC_OPEN}{', '.join(items)}{vocab.VEC_CLOSE}"


def vec_f64(values: typing.Iterable[float]) -> str:
    return vec(f64(v) for v in values)


def vec_usize(values: typing.Iterable[int]) -> str:
    return vec(usize(v) for v in values)


def identifier(name: str) -> str:
    if not is_identifier(name):
        raise LBCaseException(f"'{name}' is not a valid identifier.")

    return name


def is_identifier(name: str) -> bool:
    return isinstance(name, str) and IDENTIFIER_RE.match(name) is not None


def is_clean_string(text: str) -> bool:
    """ Whether text survives string() without producing a malformed literal. """
    return not any(c in ('"', '\\') or ord(c) < 0x20 for c in text)
