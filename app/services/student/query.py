"""
In-memory list pipeline for students: name filter, age filter, sort, page.

Expressions use a `<left>:<right>` form, e.g. `age=$gte:30` or `sort=name:desc`.
Unknown operators, sort fields and sort directions leave the collection
untouched. A missing part, a non-integer age value or a negative
offset/limit raises.
"""
import operator
import re
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

AGE_OPERATORS: Dict[str, Callable[[int, int], bool]] = {
    "$eq": operator.eq,
    "$ne": operator.ne,
    "$lte": operator.le,
    "$gte": operator.ge,
}

SORT_FIELDS = ("id", "name", "age", "email")

SORT_DIRECTIONS = {
    "asc": False,
    "desc": True,
}

DEFAULT_SORT = "id:asc"
DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0


def parse_int(value: str) -> int:
    """
    Strict 32-bit integer parse: optional sign then ASCII digits only.

    Rejects what int() would otherwise accept, such as "3_0", " 30 " or
    non-ASCII digits.
    """
    if not INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"Not an integer: {value!r}")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"Integer out of range: {value!r}")
    return number


def split_expression(expression: str) -> List[str]:
    """Split on ':' and drop trailing empty parts, so "id:" has no direction."""
    parts = expression.split(":")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def filter_by_name(students: Sequence[T], name_value: Optional[str]) -> List[T]:
    if not name_value:
        return list(students)
    return [s for s in students if s.name == name_value]


def filter_by_age(students: Sequence[T], age_expression: Optional[str]) -> List[T]:
    if not age_expression:
        return list(students)

    parts = split_expression(age_expression)
    key_operator = parts[0]
    value = parse_int(parts[1])

    compare = AGE_OPERATORS.get(key_operator)
    if compare is None:
        return list(students)
    return [s for s in students if compare(s.age, value)]


def sort_students(students: Sequence[T], sort_expression: Optional[str]) -> List[T]:
    if not sort_expression:
        return list(students)

    parts = split_expression(sort_expression)
    key_field = parts[0]
    direction = parts[1]

    if key_field not in SORT_FIELDS or direction not in SORT_DIRECTIONS:
        return list(students)

    # sorted() stays stable with reverse=True
    return sorted(
        students,
        key=operator.attrgetter(key_field),
        reverse=SORT_DIRECTIONS[direction],
    )


def paginate(students: Sequence[T], limit: int, offset: int) -> List[T]:
    """Skip `offset` items then take at most `limit`. Negative values raise."""
    if offset < 0:
        raise ValueError(f"offset must not be negative: {offset}")
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    return list(students[offset:offset + limit])
