from __future__ import annotations

import re
from typing import Iterable, Iterator

from modules.gcd.core.errors import EmptyInputError, ParseError
from modules.gcd.core.reduce import reduce_gcd

U64_MAX = 2**64 - 1

_DIGITS = re.compile(r"\+?[0-9]+")


def parse_number(token: str) -> int:
    """Parse one positive 64-bit value, raising ParseError otherwise.

    Zero is rejected here so the reducer never sees a zero operand.
    """
    if not _DIGITS.fullmatch(token):
        raise ParseError(token)
    value = int(token)
    if value == 0 or value > U64_MAX:
        raise ParseError(token)
    return value


def _parsed(tokens: Iterable[str]) -> Iterator[int]:
    for token in tokens:
        yield parse_number(token)


def compute_gcd(tokens: Iterable[str]) -> int:
    # Lazy parsing keeps the first bad token as the reported one.
    result = reduce_gcd(_parsed(tokens))
    if result is None:
        raise EmptyInputError()
    return result
