"""Row ordering driven by the live sort state.

`RowOrderer` turns a sort expression plus direction into an ordered copy of
the rows, the way an `orderBy` filter would:

 - `None` expression: rows are returned in their original order
 - callable: used as the key function
 - string: a registered named key function, else a dotted field path looked
   up on mappings (by key) or objects (by attribute); a leading `-` reverses
   the requested direction, a leading `+` is ignored

Sorting is stable and rows whose key resolves to `None` always come last.
Values of different types are grouped by type (numbers before strings)
instead of failing to compare.
"""

from __future__ import annotations
from functools import cmp_to_key
from numbers import Number
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

from .sort_coordinator import SortState
from .sort_field import SortExpression

__all__ = ["RowOrderer", "resolve_path", "split_direction_prefix"]

T = TypeVar("T")
KeyFunc = Callable[[Any], Any]


def resolve_path(row: Any, path: str) -> Any:
    value = row
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def split_direction_prefix(expression: str) -> tuple[str, bool]:
    """Strip one leading `-`/`+`; return (field path, flip direction)."""
    name = expression.strip()
    flip = False
    if name[:1] in ("-", "+"):
        flip = name[0] == "-"
        name = name[1:].strip()
    return name, flip


def _type_tag(value: Any) -> str:
    if isinstance(value, Number):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _compare(a: Any, b: Any) -> int:
    # Mixed types order by type name first, like orderBy
    tag_a, tag_b = _type_tag(a), _type_tag(b)
    if tag_a != tag_b:
        return -1 if tag_a < tag_b else 1
    try:
        return (a > b) - (a < b)
    except TypeError:
        text_a, text_b = str(a), str(b)
        return (text_a > text_b) - (text_a < text_b)


_row_key = cmp_to_key(lambda x, y: _compare(x[0], y[0]))


class RowOrderer:
    def __init__(self, key_functions: Optional[Mapping[str, KeyFunc]] = None):
        self._key_functions: Dict[str, KeyFunc] = dict(key_functions or {})

    def register(self, name: str, func: KeyFunc) -> None:
        self._key_functions[name] = func

    def _key_for(self, expression: SortExpression) -> tuple[KeyFunc, bool]:
        """Return (key function, flip direction)."""
        if callable(expression):
            return expression, False
        name, flip = split_direction_prefix(expression)
        func = self._key_functions.get(name)
        if func is not None:
            return func, flip
        return (lambda row: resolve_path(row, name)), flip

    def order(
        self,
        rows: Iterable[T],
        expression: Optional[SortExpression],
        descending: Optional[bool] = False,
    ) -> List[T]:
        items = list(rows)
        if expression is None:
            return items
        key, flip = self._key_for(expression)
        reverse = bool(descending) != flip
        keyed = [(key(row), row) for row in items]
        present = [(k, row) for k, row in keyed if k is not None]
        missing = [row for k, row in keyed if k is None]
        present.sort(key=_row_key, reverse=reverse)
        return [row for _, row in present] + missing

    def order_by_state(self, rows: Iterable[T], state: SortState) -> List[T]:
        return self.order(rows, state.expression, state.descending)
