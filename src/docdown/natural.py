"""Natural sort order for identifiers and member paths."""

from __future__ import annotations

import math
import re
from functools import cmp_to_key

_NUMBER_GROUPS = re.compile(r"(-?\d*\.?\d+)")


def _as_number(segment: str) -> float | None:
    """Parse a segment as a finite float, or return None."""
    try:
        value = float(segment)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def compare_natural(a: str, b: str) -> int:
    """Compare two strings so embedded numbers sort numerically.

    Both strings are split into alternating text and numeric runs. Numeric
    runs compare as numbers, text runs compare case-insensitively. When every
    compared run is equal the string with fewer runs sorts first.

    Returns:
        -1, 0 or 1
    """
    a_parts = _NUMBER_GROUPS.split(str(a))
    b_parts = _NUMBER_GROUPS.split(str(b))

    for x, y in zip(a_parts, b_parts):
        x_num = _as_number(x)
        y_num = _as_number(y)
        if x_num is not None and y_num is not None:
            result = _cmp(x_num, y_num)
        else:
            result = _cmp(x.lower(), y.lower())
        if result:
            return result

    return _cmp(len(a_parts), len(b_parts))


def compare_member_paths(a: str, b: str) -> int:
    """Compare dotted member paths segment by segment.

    `prototype` segments are skipped so `Foo.prototype.bar` sorts next to
    `Foo.bar`, and each segment compares naturally so `a.2` sorts before
    `a.10`. Ties are broken on the full paths to keep the order total.
    """
    a_parts = [part for part in str(a).split(".") if part != "prototype"]
    b_parts = [part for part in str(b).split(".") if part != "prototype"]

    for x, y in zip(a_parts, b_parts):
        result = compare_natural(x, y)
        if result:
            return result

    return _cmp(len(a_parts), len(b_parts)) or compare_natural(a, b)


natural_key = cmp_to_key(compare_natural)
member_path_key = cmp_to_key(compare_member_paths)
