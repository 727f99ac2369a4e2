"""
Membership Test Variants

Four textbook versions of contains(s, c): does the value c occur in the
sequence s? All four return the same answer for every input; they differ only
in how the loop is driven and how it terminates.

- contains1: flag variable, exhaustive for loop
- contains2: indexed for loop with early return
- contains3: while loop with a compound, short-circuit guard
- contains4: element iteration (no index) with early return
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from core.models import Discipline


def contains1(s: Sequence[int], c: int) -> bool:
    """
    Flag variable with an exhaustive for loop.

    `found` remembers whether c has been seen so far. Every index is visited
    even after a match, so exactly len(s) comparisons are made.
    """
    found = False
    for i in range(len(s)):
        if s[i] == c:
            found = True
    return found


def contains2(s: Sequence[int], c: int) -> bool:
    """
    Indexed for loop that returns as soon as c is found.

    Makes k + 1 comparisons when the first match is at index k, len(s) when
    there is none.
    """
    for i in range(len(s)):
        if s[i] == c:
            return True
    return False


def contains3(s: Sequence[int], c: int) -> bool:
    """
    While loop whose guard combines the bounds test and the element test.

    `and` short-circuits, so s[i] is only read while i < len(s). On exit
    either i == len(s) (end reached) or s[i] == c.
    """
    i = 0
    while i < len(s) and s[i] != c:
        i += 1
    if i < len(s):
        return True
    else:
        return False


def contains4(s: Sequence[int], c: int) -> bool:
    """Element iteration with early return; same behaviour as contains2."""
    for x in s:
        if x == c:
            return True
    return False


# ============================================================================
# REGISTRY
# ============================================================================

@dataclass(frozen=True)
class Variant:
    """A named membership variant and its comparison-count contract."""

    key: str
    label: str
    func: Callable[[Sequence[int], int], bool]
    discipline: Discipline

    def __call__(self, s: Sequence[int], c: int) -> bool:
        return self.func(s, c)


VARIANTS: Tuple[Variant, ...] = (
    Variant("v1", "Version 1 (flag + for loop)", contains1, Discipline.EXHAUSTIVE),
    Variant("v2", "Version 2 (early exit + for loop)", contains2, Discipline.FIRST_MATCH),
    Variant("v3", "Version 3 (while loop)", contains3, Discipline.FIRST_MATCH),
    Variant("v4", "Version 4 (for-each loop)", contains4, Discipline.FIRST_MATCH),
)


def get_variant(key: str) -> Variant:
    """
    Look a variant up by key ("v1" ... "v4").

    Raises:
        KeyError: if no variant has that key
    """
    for variant in VARIANTS:
        if variant.key == key.lower():
            return variant
    known = ", ".join(v.key for v in VARIANTS)
    raise KeyError(f"Unknown variant {key!r} (known: {known})")
