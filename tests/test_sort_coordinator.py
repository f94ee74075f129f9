import random

from sortable_table.services.sort_coordinator import SortCoordinator, SortState
from sortable_table.services.sort_field import SortField, SortOrder


def test_initial_state_is_unsorted():
    c = SortCoordinator()
    assert c.active_field is None
    assert c.state == SortState.UNSORTED
    assert c.get_sort_expression() is None
    assert c.get_sort_descending() is None


def test_first_click_activates_ascending():
    c = SortCoordinator()
    f = SortField("title")
    c.set_active_sort_field(f)
    assert f.is_active and not f.is_descending
    assert c.state == SortState(SortOrder.ASCENDING, "title")
    assert c.get_sort_expression() == "title"
    assert c.get_sort_descending() is False


def test_clicking_active_field_toggles_direction():
    c = SortCoordinator()
    f = SortField("title")
    c.set_active_sort_field(f)
    assert f.is_active
    c.set_active_sort_field(f)
    assert f.is_active
    assert f.is_descending is True
    assert c.get_sort_descending() is True
    c.set_active_sort_field(f)
    assert f.is_descending is False


def test_switching_fields_deactivates_and_resets_previous():
    c = SortCoordinator()
    a, b = SortField("a"), SortField("b")
    c.set_active_sort_field(a)
    c.set_active_sort_field(a)  # a descending
    c.set_active_sort_field(b)
    assert a.is_active is False and a.is_descending is False
    assert b.is_active is True and b.is_descending is False
    assert c.get_sort_expression() == "b"
    # a comes back fresh ascending
    c.set_active_sort_field(a)
    assert a.is_descending is False
    assert b.is_active is False


def test_new_field_keeps_preset_direction():
    c = SortCoordinator()
    f = SortField("a")
    f.set_descending()
    c.set_active_sort_field(f)
    assert c.state.order is SortOrder.DESCENDING


def test_at_most_one_active_field_for_random_clicks():
    rnd = random.Random(1234)
    c = SortCoordinator()
    fields = [c.register(SortField(str(i))) for i in range(5)]
    for _ in range(200):
        c.set_active_sort_field(rnd.choice(fields))
        active = c.active_fields()
        assert len(active) == 1
        assert active[0] is c.active_field


def test_register_is_identity_based_and_idempotent():
    c = SortCoordinator()
    a1, a2 = SortField("a"), SortField("a")
    c.register(a1)
    c.register(a1)
    c.register(a2)
    assert len(c.fields) == 2


def test_unregister_active_field_clears_state():
    c = SortCoordinator()
    a, b = SortField("a"), SortField("b")
    c.register(a)
    c.register(b)
    c.set_active_sort_field(a)
    c.set_active_sort_field(a)
    c.unregister(a)
    assert c.active_field is None
    assert c.state == SortState.UNSORTED
    assert a.is_active is False and a.is_descending is False
    assert c.fields == [b]


def test_unregister_inactive_field_keeps_state():
    c = SortCoordinator()
    a, b = SortField("a"), SortField("b")
    c.set_active_sort_field(a)
    c.register(b)
    c.unregister(b)
    assert c.active_field is a


def test_clear_returns_to_unsorted():
    c = SortCoordinator()
    f = SortField("a")
    c.set_active_sort_field(f)
    c.clear()
    assert c.get_sort_expression() is None
    assert f.is_active is False
    c.clear()  # no-op


def test_state_helpers():
    assert SortState.UNSORTED.is_sorted is False
    assert SortState.UNSORTED.descending is None
    assert SortState(SortOrder.DESCENDING, "x").descending is True
    assert SortState(SortOrder.ASCENDING, "x").descending is False
