"""
Subcmd utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated wrappers for clean tracebacks and help.

- distance(source, target)
  • Damerau–Levenshtein edit distance (insertions, deletions, substitutions and
    transpositions of adjacent characters), used to suggest command names.

Stability and contract
- Names in __all__ are re-exported by the package; everything else is internal.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> distance("cmd-a", "cmd-b")
    1
"""
import functools
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process‑wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden (see __init_subclass__).
    - union: participates in PEP 604 unions so `str | Unset` works in isinstance checks.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    return `default` when `object` is Unset; otherwise return `object` unchanged.

    normalizes sentinel values at the API boundary so downstream code can treat
    parameters uniformly without branching on Unset.
    """
    return default if object is Unset else object


def rename(x, /, name=None):
    """
    set a stable __name__/__qualname__ on a callable, or return a curried renamer.

    parameters
    - x: callable | str
      • callable → rename in place.
      • str      → desired name; returns a callable that will rename a future function.
    - name: str | None
      target name to assign.

    errors
    - TypeError if a callable is given and the name is not a string.
    """
    if isinstance(x, str):
        return functools.partial(rename, name=x)
    if not isinstance(name, str):
        raise TypeError("callable name must be a string")
    x.__qualname__ = name
    x.__name__ = name
    return x


def distance(source, target, /):
    """
    compute the Damerau–Levenshtein distance between two strings.

    unlike the restricted "optimal string alignment" variant, a transposed pair may
    be edited again afterwards (e.g. "ca" → "abc" is 2, not 3).

    parameters
    - source, target: str (positional-only)

    returns
    - int: minimum number of insertions, deletions, substitutions and adjacent
      transpositions needed to turn `source` into `target`.

    errors
    - TypeError when either argument is not a string.
    """
    if not isinstance(source, str) or not isinstance(target, str):
        raise TypeError("distance() arguments must be strings")
    if source == target:
        return 0
    if not source or not target:
        return len(source) + len(target)

    rows, columns = len(source), len(target)
    ceiling = rows + columns

    # matrix is shifted by one row/column: index 0 holds the ceiling guard
    matrix = [[ceiling] * (columns + 2)]
    matrix += [[ceiling] + [0] * (columns + 1) for _ in range(rows + 1)]
    for row in range(rows + 1):
        matrix[row + 1][1] = row
    for column in range(columns + 1):
        matrix[1][column + 1] = column

    seen = {}  # character -> last row of `source` where it appeared
    for row in range(1, rows + 1):
        anchor = 0  # last column in this row where characters matched
        for column in range(1, columns + 1):
            previous_row = seen.get(target[column - 1], 0)
            previous_column = anchor
            if source[row - 1] == target[column - 1]:
                cost = 0
                anchor = column
            else:
                cost = 1
            matrix[row + 1][column + 1] = min(
                matrix[row][column] + cost,
                matrix[row + 1][column] + 1,
                matrix[row][column + 1] + 1,
                matrix[previous_row][previous_column] + (row - previous_row - 1) + 1 + (column - previous_column - 1),
            )
        seen[source[row - 1]] = row

    return matrix[rows + 1][columns + 1]


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "distance",
)
