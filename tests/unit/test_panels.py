"""Tests for panel composition and coordinate resolution."""

from unittest.mock import patch

import pytest
from hypothesis import given, strategies as st

from gridui.components import Button, Label, TextBox
from gridui.core.exceptions import CompositionError, ValidationError
from gridui.dialogs import Dialog
from gridui.layout import Direction, PanelLocation, WidgetLocation
from gridui.panels import GridPanel, StackPanel


def placements(panel):
    return {pair.widget: pair.location for pair in panel.get_widget_location_pairs()}


# ============================================================================
# Ownership
# ============================================================================

@pytest.mark.unit
def test_adding_sets_parent():
    """Adding a component makes the panel its parent."""
    panel = GridPanel()
    label = Label()
    panel.add(label, 0, 0)
    assert label.parent is panel
    assert panel.contains(label)


@pytest.mark.unit
def test_cannot_add_parented_component():
    """A component belongs to one panel at a time."""
    first, second = GridPanel(), StackPanel()
    label = Label()
    first.add(label, 0, 0)

    with pytest.raises(CompositionError):
        second.add(label)
    assert len(second) == 0
    assert label.parent is first


@pytest.mark.unit
def test_cannot_add_panel_to_itself():
    """Self containment is rejected."""
    panel = GridPanel()
    with pytest.raises(CompositionError):
        panel.add(panel, 0, 0)
    assert panel.parent is None


@pytest.mark.unit
def test_cannot_create_cycle():
    """Adding an ancestor below one of its descendants is rejected."""
    outer, middle, inner = GridPanel(), StackPanel(), GridPanel()
    outer.add(middle, 0, 0)
    middle.add(inner)

    with pytest.raises(CompositionError):
        inner.add(outer, 0, 0)
    assert outer.parent is None
    assert inner.children == ()


@pytest.mark.unit
def test_cannot_nest_dialog(host):
    """Dialogs are always roots."""
    with pytest.raises(CompositionError):
        GridPanel().add(Dialog(host), 0, 0)


@pytest.mark.unit
def test_remove_releases_child():
    """Removed components can be added elsewhere."""
    grid, stack = GridPanel(), StackPanel()
    label = Label()
    grid.add(label, 0, 0)
    grid.remove(label)

    assert label.parent is None
    stack.add(label)
    assert label.parent is stack


@pytest.mark.unit
def test_remove_or_move_non_child_fails():
    """Only children can be moved or removed."""
    grid = GridPanel()
    with pytest.raises(CompositionError):
        grid.remove(Label())
    with pytest.raises(CompositionError):
        grid.move(Label(), 1, 1)


@pytest.mark.unit
def test_clear_releases_everything():
    """Clearing a panel releases all children."""
    grid = GridPanel()
    labels = [Label() for _ in range(3)]
    for row, label in enumerate(labels):
        grid.add(label, row, 0)

    grid.clear()

    assert grid.children == ()
    assert all(label.parent is None for label in labels)


# ============================================================================
# Grid resolution
# ============================================================================

@pytest.mark.unit
def test_grid_places_at_explicit_locations():
    """Widgets keep the location they were added with."""
    grid = GridPanel()
    a, b = Label("a"), Label("b")
    grid.add(a, 0, 0).add(b, 1, 2, 1, 3)

    assert placements(grid) == {a: WidgetLocation(0, 0), b: WidgetLocation(1, 2, 1, 3)}
    assert grid.row_count == 2
    assert grid.column_count == 5


@pytest.mark.unit
def test_grid_accepts_colliding_locations():
    """Collisions are only an error at submission time."""
    grid = GridPanel()
    grid.add(Label(), 0, 0)
    grid.add(Label(), 0, 0)
    assert len(list(grid.get_widget_location_pairs())) == 2


@pytest.mark.unit
def test_hidden_widgets_are_not_placed():
    """Hidden widgets contribute nothing, not even extent."""
    grid = GridPanel()
    visible, hidden = Label(), Label()
    grid.add(visible, 0, 0).add(hidden, 4, 4)
    hidden.is_visible = False

    assert list(placements(grid)) == [visible]
    assert grid.row_count == 1


@pytest.mark.unit
def test_nested_grid_is_translated():
    """Nested panel placements are offset by the panel's location."""
    outer, inner = GridPanel(), GridPanel()
    label = Label()
    inner.add(label, 1, 1, 2, 1)
    outer.add(inner, 3, 4)

    assert placements(outer) == {label: WidgetLocation(4, 5, 2, 1)}
    assert outer.get_location(inner) == PanelLocation(3, 4)


@pytest.mark.unit
def test_panels_cannot_span():
    """Panels extend over their own derived size."""
    with pytest.raises(ValidationError):
        GridPanel().add(GridPanel(), 0, 0, row_span=2)


@pytest.mark.unit
def test_move_changes_location():
    """Moved widgets resolve at their new location."""
    grid = GridPanel()
    label = Label()
    grid.add(label, 0, 0)
    grid.move_to(label, WidgetLocation(2, 3))
    assert grid.get_location(label) == WidgetLocation(2, 3)


@pytest.mark.unit
def test_hidden_panel_resolves_to_nothing():
    """A hidden panel has no placements and no extent."""
    outer, inner = GridPanel(), GridPanel()
    inner.add(Label(), 0, 0)
    outer.add(inner, 0, 0)
    inner.is_visible = False

    assert placements(outer) == {}
    assert inner.row_count == 0


# ============================================================================
# Stack resolution
# ============================================================================

@pytest.mark.unit
def test_stack_skips_hidden_widgets():
    """W1 visible, W2 hidden, W3 visible with span 2."""
    stack = StackPanel(Direction.VERTICAL)
    w1, w2, w3 = Label("w1"), Label("w2"), Label("w3")
    stack.add(w1).add(w2).add(w3, span=2)
    w2.is_visible = False

    assert placements(stack) == {w1: WidgetLocation(0, 0, 1, 1), w3: WidgetLocation(1, 0, 2, 1)}
    assert stack.row_count == 3


@pytest.mark.unit
def test_stack_in_dialog_scenario(dialog):
    """Row count shrinks when a stacked widget is hidden."""
    stack = StackPanel()
    w1, w2, w3 = Label("w1"), Label("w2"), Label("w3")
    stack.add(w1).add(w2).add(w3, span=2)
    dialog.add(stack, 0, 0)
    assert dialog.row_count == 4

    w2.is_visible = False
    assert dialog.row_count == 3
    assert dialog.build().row_defs == "auto;auto;auto"


@pytest.mark.unit
def test_horizontal_stack():
    """Horizontal stacks advance along columns."""
    stack = StackPanel(Direction.HORIZONTAL)
    a, b = Label("a"), Label("b")
    stack.add(a, span=3).add(b)

    assert placements(stack) == {a: WidgetLocation(0, 0, 1, 3), b: WidgetLocation(0, 3, 1, 1)}
    assert stack.column_count == 4
    assert stack.row_count == 1


@pytest.mark.unit
def test_stack_nested_panel_takes_its_row_count():
    """A nested panel takes as many slots as it has rows."""
    stack = StackPanel()
    inner = GridPanel()
    first, nested, last = Label(), Label(), Label()
    inner.add(nested, 1, 0)
    stack.add(first).add(inner).add(last)

    assert placements(stack) == {
        first: WidgetLocation(0, 0),
        nested: WidgetLocation(2, 0),
        last: WidgetLocation(3, 0),
    }


@pytest.mark.unit
def test_stack_skips_empty_panels():
    """Panels without visible widgets take no slot."""
    stack = StackPanel()
    empty = GridPanel()
    a, b = Label(), Label()
    stack.add(a).add(empty).add(b)

    assert placements(stack)[b] == WidgetLocation(1, 0)


@pytest.mark.unit
def test_deep_stack_chain_resolves_each_panel_once():
    """Nested stacks are resolved once per query, however deep the chain."""
    depth = 25
    leaf = Label()
    panel = StackPanel(components=[leaf])
    for _ in range(depth - 1):
        panel = StackPanel(components=[Label(), panel])

    original = StackPanel._resolve
    with patch.object(StackPanel, "_resolve", autospec=True, side_effect=original) as resolve:
        assert panel.row_count == depth
    assert resolve.call_count == depth
    assert placements(panel)[leaf] == WidgetLocation(depth - 1, 0)


@pytest.mark.unit
def test_stack_recomputes_on_visibility_change():
    """Placements are never cached."""
    stack = StackPanel()
    a, b = Label(), Label()
    stack.add(a).add(b)

    a.is_visible = False
    assert placements(stack) == {b: WidgetLocation(0, 0)}
    a.is_visible = True
    assert placements(stack) == {a: WidgetLocation(0, 0), b: WidgetLocation(1, 0)}


@pytest.mark.unit
@given(st.lists(st.tuples(st.booleans(), st.integers(1, 4)), max_size=20))
def test_stack_row_count_sums_visible_spans(entries):
    """The row count of a vertical stack is the sum of visible spans."""
    stack = StackPanel()
    for visible, span in entries:
        label = Label()
        label.is_visible = visible
        stack.add(label, span=span)

    assert stack.row_count == sum(span for visible, span in entries if visible)


@pytest.mark.unit
def test_stack_sequence_protocol():
    """Stacks behave as mutable sequences of components."""
    stack = StackPanel()
    a, b, c = Label("a"), Label("b"), Label("c")
    stack.append(a)
    stack.append(c)
    stack.insert(1, b)

    assert list(stack) == [a, b, c]
    assert stack[1] is b
    assert stack.index(c) == 2
    assert b in stack

    removed = stack.remove_at(0)
    assert removed is a and a.parent is None

    del stack[0]
    assert list(stack) == [c]
    assert b.parent is None


@pytest.mark.unit
def test_stack_item_assignment_swaps_ownership():
    """Replacing an item releases the old component."""
    stack = StackPanel()
    old, new = Button("old"), TextBox()
    stack.add(old, span=2)

    stack[0] = new

    assert old.parent is None
    assert new.parent is stack
    assert stack.get_span(new) == 2


@pytest.mark.unit
def test_stack_item_assignment_rejects_parented_component():
    """A failed assignment leaves the stack untouched."""
    stack, other = StackPanel(), StackPanel()
    kept, foreign = Label(), Label()
    stack.add(kept)
    other.add(foreign)

    with pytest.raises(CompositionError):
        stack[0] = foreign

    assert stack[0] is kept
    assert kept.parent is stack


@pytest.mark.unit
def test_stack_span_must_be_positive():
    """Spans are at least one slot."""
    with pytest.raises(ValidationError):
        StackPanel().add(Label(), span=0)


# ============================================================================
# Queries and bulk state
# ============================================================================

@pytest.mark.unit
def test_get_widgets_and_panels():
    """Queries optionally descend into nested panels."""
    outer, inner = GridPanel(), StackPanel()
    a, b = Label(), Button()
    outer.add(a, 0, 0).add(inner, 1, 0)
    inner.add(b)

    assert outer.get_widgets(include_nested=False) == [a]
    assert outer.get_widgets() == [a, b]
    assert outer.get_panels() == [inner]
    assert outer.get_interactive_widgets() == [b]


@pytest.mark.unit
def test_bulk_visibility_and_enabled_state():
    """Bulk helpers reach nested widgets."""
    outer, inner = GridPanel(), StackPanel()
    button, box = Button(), TextBox()
    outer.add(button, 0, 0).add(inner, 1, 0)
    inner.add(box)

    outer.disable_widgets()
    assert not button.is_enabled and not box.is_enabled

    outer.enable_widgets(include_nested=False)
    assert button.is_enabled and not box.is_enabled

    outer.hide_widgets()
    assert placements(outer) == {}
    outer.show_widgets()
    assert len(placements(outer)) == 2
