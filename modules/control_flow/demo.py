"""
Control Structures Walkthrough

Fourteen small examples pairing pseudocode notation with Python:

    if <condition> then <statements> end if      ->  if ...:
    for <control> do <statements> end for        ->  for ... in range(...):
    while <condition> do <statements> end while  ->  while ...:

Older texts close blocks with "fi" and "od"; examples 8 and 9 show those.
Each example returns its output lines instead of printing them so the
walkthrough can be tested.
"""

from typing import Callable, List


def _line(number: int, text: str) -> str:
    return f"Example {number} → {text}"


def example_if() -> List[str]:
    # if number > 0 then print("positive") end if
    number = 10
    lines = []
    if number > 0:
        lines.append(_line(1, "The number is positive."))
    return lines


def example_if_else() -> List[str]:
    number = -3
    if number >= 0:
        return [_line(2, "Non-negative number.")]
    else:
        return [_line(2, "Negative number.")]


def example_elif_chain() -> List[str]:
    """Only the first true branch runs."""
    score = 75
    if score >= 90:
        grade = "Grade A"
    elif score >= 75:
        grade = "Grade B"
    elif score >= 50:
        grade = "Grade C"
    else:
        grade = "Fail"
    return [_line(3, grade)]


def example_for() -> List[str]:
    # for i := 1 to 5 do print(i) end for
    return [_line(4, f"i = {i}") for i in range(1, 6)]


def example_for_with_if() -> List[str]:
    """Decision nested inside repetition."""
    lines = []
    for i in range(1, 11):
        if i % 2 == 0:
            lines.append(_line(5, f"Even: {i}"))
        else:
            lines.append(_line(5, f"Odd: {i}"))
    return lines


def example_while() -> List[str]:
    # while j <= 3 do print(j); j := j + 1 end while
    lines = []
    j = 1
    while j <= 3:
        lines.append(_line(6, f"j = {j}"))
        j += 1
    return lines


def example_do_while() -> List[str]:
    """
    repeat ... until: the body runs at least once before the test.

    Python has no do-while; the test sits at the bottom of a `while True`.
    """
    lines = []
    k = 1
    while True:
        lines.append(_line(7, f"k = {k}"))
        k += 1
        if not k <= 3:
            break
    return lines


def example_if_fi() -> List[str]:
    # if age >= 18 then print("Adult") fi
    age = 18
    lines = []
    if age >= 18:
        lines.append(_line(8, "Adult (old fi-style)"))
    return lines


def example_for_od() -> List[str]:
    # for i := 1 to 3 do print(i) od
    return [_line(9, f"for-od style → i = {i}") for i in range(1, 4)]


def example_if_else_block() -> List[str]:
    temperature = 28
    if temperature > 30:
        return [_line(10, "Hot day!")]
    else:
        return [_line(10, "Not too hot today.")]


def example_break() -> List[str]:
    """Early termination, as used by search loops."""
    lines = []
    for i in range(1, 11):
        if i == 5:
            lines.append(_line(11, "Found 5, stopping early!"))
            break
        lines.append(_line(11, f"i = {i}"))
    return lines


def example_continue() -> List[str]:
    """Skip 5, keep going."""
    lines = []
    for i in range(1, 8):
        if i == 5:
            continue
        lines.append(_line(12, f"i = {i}"))
    return lines


def example_nested_loops() -> List[str]:
    lines = []
    for x in range(1, 4):
        for y in range(1, 3):
            lines.append(_line(13, f"x = {x}, y = {y}"))
    return lines


def example_while_with_if() -> List[str]:
    lines = []
    p = 1
    while p <= 5:
        if p == 3:
            lines.append(_line(14, "Reached midpoint!"))
        lines.append(_line(14, f"p = {p}"))
        p += 1
    return lines


EXAMPLES: List[Callable[[], List[str]]] = [
    example_if,
    example_if_else,
    example_elif_chain,
    example_for,
    example_for_with_if,
    example_while,
    example_do_while,
    example_if_fi,
    example_for_od,
    example_if_else_block,
    example_break,
    example_continue,
    example_nested_loops,
    example_while_with_if,
]


def run_demo() -> List[str]:
    """All example lines, in order."""
    lines = []
    for example in EXAMPLES:
        lines.extend(example())
    return lines


def print_demo():
    for line in run_demo():
        print(line)
