import pytest

from sortable_table.errors import MalformedBindingError, SetupError
from sortable_table.services.binding_expression import (
    BindingExpression,
    OrderFilter,
    rewrite_binding_expression,
)

FILTER = "| orderBy:getSortExpression():isSortDescending()"


def test_rewrite_simple_expression():
    assert rewrite_binding_expression("show in shows") == f"show in shows {FILTER}"


def test_rewrite_inserts_before_track_by():
    out = rewrite_binding_expression("show in shows track by show.id")
    assert out == f"show in shows {FILTER} track by show.id"
    assert out.index("shows") < out.index(FILTER) < out.index("track by show.id")


def test_rewrite_normalizes_surrounding_whitespace():
    out = rewrite_binding_expression("  show   in\n shows   track  by  show.id ")
    assert out == f"show in shows {FILTER} track by show.id"


def test_missing_in_is_malformed():
    with pytest.raises(MalformedBindingError) as info:
        rewrite_binding_expression("shows")
    assert isinstance(info.value, SetupError)
    assert info.value.context["expression"] == "shows"


@pytest.mark.parametrize("text", ["", "   ", "in shows", "show in", "show in track by show.id"])
def test_incomplete_expressions_are_malformed(text):
    with pytest.raises(MalformedBindingError):
        BindingExpression.parse(text)


def test_empty_track_by_key_is_malformed():
    with pytest.raises(MalformedBindingError):
        BindingExpression.parse("show in shows track by")


def test_destructured_item():
    b = BindingExpression.parse("(key, value) in items track by key")
    assert b.item == "(key, value)"
    assert b.collection == "items"
    assert b.track_by == "key"


def test_nested_in_and_track_by_tokens_are_ignored():
    text = "row in filter(rows, 'track by in') | limitTo:(a in b) track by row.id"
    b = BindingExpression.parse(text)
    assert b.item == "row"
    assert b.collection == "filter(rows, 'track by in') | limitTo:(a in b)"
    assert b.track_by == "row.id"


def test_existing_filters_are_kept_before_ordering():
    out = rewrite_binding_expression("show in shows | filter:query")
    assert out == f"show in shows | filter:query {FILTER}"


def test_custom_order_filter():
    custom = OrderFilter(name="sortBy", key_accessor="key()", direction_accessor="desc()")
    out = rewrite_binding_expression("x in xs track by $index", custom)
    assert out == "x in xs | sortBy:key():desc() track by $index"


def test_parse_render_is_stable():
    b = BindingExpression.parse("show in shows track by show.id")
    assert b.render() == "show in shows track by show.id"
    assert BindingExpression.parse("show in shows").track_by is None
