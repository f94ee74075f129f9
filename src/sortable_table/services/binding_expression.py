"""Binding expression parsing and ordering injection.

A row binding expression has the shape::

    <item> in <collection> [track by <key>]

`rewrite_binding_expression` inserts an ordering filter between the collection
and the optional tracking clause. The filter references accessor calls rather
than literal values so the host framework re-evaluates the ordering every time
the sort state changes; the rewrite itself happens once, at setup.

The parser works on top-level tokens: whitespace inside brackets or quotes
never splits a token, so `in` / `track by` appearing in nested expressions or
string literals are not mistaken for separators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import settings
from ..errors import MalformedBindingError

__all__ = [
    "BindingExpression",
    "OrderFilter",
    "rewrite_binding_expression",
]

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}
_QUOTES = {"'", '"'}


def _tokenize(text: str) -> List[Tuple[str, int, int]]:
    """Split into top-level whitespace separated tokens as (token, start, end)."""
    tokens: List[Tuple[str, int, int]] = []
    depth = 0
    quote: Optional[str] = None
    escaped = False
    start: Optional[int] = None
    for i, ch in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch.isspace() and depth == 0:
            if start is not None:
                tokens.append((text[start:i], start, i))
                start = None
            continue
        if start is None:
            start = i
        if ch in _QUOTES:
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and depth > 0:
            depth -= 1
    if start is not None:
        tokens.append((text[start:], start, len(text)))
    return tokens


@dataclass(frozen=True)
class OrderFilter:
    name: str = settings.ORDER_FILTER_NAME
    key_accessor: str = settings.SORT_KEY_ACCESSOR
    direction_accessor: str = settings.SORT_DIRECTION_ACCESSOR

    def render(self) -> str:
        return f"| {self.name}:{self.key_accessor}:{self.direction_accessor}"


@dataclass(frozen=True)
class BindingExpression:
    item: str
    collection: str
    track_by: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "BindingExpression":
        tokens = _tokenize(text)
        sep = next(
            (i for i, (tok, _, _) in enumerate(tokens) if tok == "in" and i > 0),
            None,
        )
        if sep is None:
            raise MalformedBindingError(
                f"expected '<item> in <collection>' but got {text!r}",
                context={"expression": text},
            )
        item = text[tokens[0][1] : tokens[sep - 1][2]]

        rest = tokens[sep + 1 :]
        track_at = next(
            (
                i
                for i in range(len(rest) - 1)
                if rest[i][0] == "track" and rest[i + 1][0] == "by"
            ),
            None,
        )
        collection_tokens = rest if track_at is None else rest[:track_at]
        if not collection_tokens:
            raise MalformedBindingError(
                f"binding expression {text!r} has no collection",
                context={"expression": text},
            )
        collection = text[collection_tokens[0][1] : collection_tokens[-1][2]]

        track_by: Optional[str] = None
        if track_at is not None:
            key_tokens = rest[track_at + 2 :]
            if not key_tokens:
                raise MalformedBindingError(
                    f"binding expression {text!r} has an empty 'track by' clause",
                    context={"expression": text},
                )
            track_by = text[key_tokens[0][1] : key_tokens[-1][2]]
        return cls(item=item, collection=collection, track_by=track_by)

    def with_ordering(self, order_filter: OrderFilter | None = None) -> "BindingExpression":
        order_filter = order_filter or OrderFilter()
        return BindingExpression(
            item=self.item,
            collection=f"{self.collection} {order_filter.render()}",
            track_by=self.track_by,
        )

    def render(self) -> str:
        text = f"{self.item} in {self.collection}"
        if self.track_by is not None:
            text += f" track by {self.track_by}"
        return text


def rewrite_binding_expression(text: str, order_filter: OrderFilter | None = None) -> str:
    """Return `text` with an ordering filter injected after the collection.

    Raises:
        MalformedBindingError: `text` has no recognizable `in` separator.
    """
    return BindingExpression.parse(text).with_ordering(order_filter).render()
