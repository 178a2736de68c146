from __future__ import annotations

"""Levenshtein edit distance over fixed-width code units."""

from collections.abc import Sequence as SequenceABC
from typing import Any, Sequence, Union

CodeUnits = Union[bytes, Sequence[Any]]

_BYTES_LIKE = (bytes, bytearray, memoryview)


def code_units(value: Sequence[Any] | str, *, argument: str = "value") -> CodeUnits:
    """Return the units :func:`levenshtein_distance` compares for *value*.

    Text is encoded as UTF-8, so a character outside ASCII counts as several
    units; lone surrogates are encoded too. Bytes-like objects are read byte
    by byte and any other sequence is used as-is, one element per unit. Text
    and bytes are never compared against a generic sequence.
    """

    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    if isinstance(value, _BYTES_LIKE):
        return bytes(value)
    if isinstance(value, SequenceABC):
        return value
    raise TypeError(
        f"{argument} must be a str, bytes-like object or sequence, "
        f"not {type(value).__name__}"
    )


def levenshtein_distance(a: Sequence[Any] | str, b: Sequence[Any] | str) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    The distance is the minimum number of single-unit insertions, deletions
    and substitutions turning *a* into *b*. Only two rows of the
    Wagner-Fischer table are kept, sized after the shorter input.

    >>> levenshtein_distance("playwright", "playright")
    1
    """

    a = code_units(a, argument="a")
    b = code_units(b, argument="b")
    if isinstance(a, bytes) != isinstance(b, bytes):
        raise TypeError(
            "cannot compare text or bytes with a generic sequence; "
            "pass both as text/bytes or both as sequences"
        )
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, unit_a in enumerate(a, start=1):
        current = [i]
        for j, unit_b in enumerate(b, start=1):
            if unit_a == unit_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


__all__ = ["CodeUnits", "code_units", "levenshtein_distance"]
