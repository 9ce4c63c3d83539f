"""Tests for the gridded console layout."""

import numpy as np
import pytest

from panelgrid.core import SceneNode, Transform
from panelgrid.errors import DestroyedError, ValidationError
from panelgrid.ui import ConsoleLayout, ElementSize, GriddedConsole

PITCH_X = 0.5 + 0.065
PITCH_Z = 0.125 + 0.065


def make_nodes(backend, count):
    return [backend.create_node(name=f"cell_{i}") for i in range(count)]


def expected_position(row, start_col, end_col=None, cols=4):
    end_col = start_col if end_col is None else end_col
    mid = (start_col + end_col) / 2
    return ((mid - (cols - 1) / 2) * PITCH_X, -PITCH_Z * row)


@pytest.mark.parametrize("cols", [0, -2, 1.5, True, "4"])
def test_invalid_column_count(backend, cols):
    with pytest.raises(ValidationError):
        GriddedConsole(backend, ConsoleLayout(), ElementSize(0.1, 0.1), cols)


@pytest.mark.parametrize(
    "size,layout",
    [
        (ElementSize(0.0, 0.5), ConsoleLayout()),
        (ElementSize(0.1, -0.5), ConsoleLayout()),
        (ElementSize(0.1, 0.5), ConsoleLayout(gutter_y=-0.1)),
    ],
)
def test_invalid_geometry(backend, size, layout):
    with pytest.raises(ValidationError):
        GriddedConsole(backend, layout, size, 2)


def test_elements_reparented_under_container(backend, console):
    node = backend.create_node()
    console.add_element(node)
    assert node.parent is console.container
    assert node in console.container.children


def test_rows_and_columns_follow_insertion_order(backend, console):
    nodes = make_nodes(backend, 9)
    for k, node in enumerate(nodes):
        assert console.add_element(node) == k
        row, col = divmod(k, 4)
        x, z = expected_position(row, col)
        assert node.transform.translation[0] == pytest.approx(x)
        assert node.transform.translation[2] == pytest.approx(z)


def test_single_column_console_stacks_rows(ui, backend):
    console = ui.create_gridded_console(ConsoleLayout(0.1, 0.0), ElementSize(0.2, 1.0))
    nodes = make_nodes(backend, 3)
    for node in nodes:
        console.add_element(node)
    assert [n.transform.translation[0] for n in nodes] == [0.0, 0.0, 0.0]
    assert [n.transform.translation[2] for n in nodes] == pytest.approx([0.0, -0.3, -0.6])


def test_grid_is_centered_on_origin(backend, console):
    nodes = make_nodes(backend, 4)
    for node in nodes:
        console.add_element(node)
    xs = [n.transform.translation[0] for n in nodes]
    assert sum(xs) == pytest.approx(0.0)
    assert xs[0] == pytest.approx(-1.5 * PITCH_X)


def test_vertical_offset_is_left_alone(backend, console):
    node = backend.create_node(transform=Transform(translation=[9.0, 0.3, 9.0]))
    console.add_element(node)
    np.testing.assert_allclose(node.transform.translation, [-1.5 * PITCH_X, 0.3, 0.0])


def test_multi_column_element_reserves_slots(backend, console):
    wide, after = make_nodes(backend, 2)
    console.add_element(wide, col_span=2)
    console.add_element(after)

    assert console.slot_count == 3
    assert wide.transform.translation[0] == pytest.approx(expected_position(0, 0, 1)[0])
    assert console.index_of(after) == 2
    assert after.transform.translation[0] == pytest.approx(expected_position(0, 2)[0])


def test_full_width_element_is_centered(backend, console):
    title = backend.create_node()
    console.add_element(title, col_span=4)
    assert title.transform.translation[0] == pytest.approx(0.0)
    assert console.slot_count == 4


def test_over_wide_span_is_clamped_to_row_end(backend, console):
    nodes = make_nodes(backend, 3)
    for node in nodes:
        console.add_element(node)

    wide = backend.create_node()
    console.add_element(wide, col_span=3)

    # Only column 3 is used; nothing spills into the next row
    assert console.slot_count == 4
    assert wide.transform.translation[0] == pytest.approx(expected_position(0, 3)[0])

    nxt = backend.create_node()
    assert console.add_element(nxt) == 4
    assert console.cell_of(4) == (1, 0)


def test_non_positive_span_counts_as_one(backend, console):
    node = backend.create_node()
    console.add_element(node, col_span=0)
    assert console.slot_count == 1
    assert node.transform.translation[0] == pytest.approx(expected_position(0, 0)[0])


def test_removed_slot_is_never_reused(backend, console):
    nodes = make_nodes(backend, 5)
    for node in nodes:
        console.add_element(node)

    assert console.remove_element(nodes[1]) is True
    assert console.slot_count == 5

    sixth = backend.create_node()
    assert console.add_element(sixth) == 5
    assert console.cell_of(5) == (1, 1)
    x, z = expected_position(1, 1)
    assert sixth.transform.translation[0] == pytest.approx(x)
    assert sixth.transform.translation[2] == pytest.approx(z)


def test_removal_keeps_later_elements_in_place(backend, console):
    nodes = make_nodes(backend, 6)
    for node in nodes:
        console.add_element(node)
    before = [n.transform.translation.copy() for n in nodes]

    console.remove_element(nodes[0])

    for node, pos in zip(nodes[1:], before[1:]):
        np.testing.assert_allclose(node.transform.translation, pos)


def test_remove_destroys_element(backend, console):
    node = backend.create_node()
    console.add_element(node)
    console.remove_element(node)

    assert not node.alive
    assert node.id in backend.released
    assert list(console.elements()) == []
    assert len(console) == 0


def test_remove_unknown_element_is_a_no_op(backend, console):
    placed, stranger = make_nodes(backend, 2)
    console.add_element(placed)

    assert console.remove_element(stranger) is False
    assert stranger.alive
    assert console.slot_count == 1


def test_remove_after_clear_is_a_no_op(backend, console):
    node = backend.create_node()
    console.add_element(node)
    console.clear()
    assert console.remove_element(node) is False


def test_clear_destroys_everything_and_resets_origin(backend, console):
    nodes = make_nodes(backend, 6)
    first_position = None
    for node in nodes:
        console.add_element(node)
        if first_position is None:
            first_position = node.transform.translation.copy()

    console.clear()

    assert console.slot_count == 0
    assert all(not n.alive for n in nodes)
    assert console.container.children == []

    fresh = backend.create_node()
    assert console.add_element(fresh) == 0
    np.testing.assert_allclose(fresh.transform.translation, first_position)


def test_mixed_element_types(backend, ui, console):
    node = backend.create_node()
    label = ui.create_label(ElementSize(0.125, 0.5), "Team")
    button = ui.create_button(ElementSize(0.125, 0.5), text="+")

    for element in (node, label, button):
        console.add_element(element)

    assert list(console.elements()) == [node, label, button]
    assert label.parent is console.container
    assert button.parent is console.container
    assert label.transform.translation[0] == pytest.approx(expected_position(0, 1)[0])
    assert button.transform.translation[0] == pytest.approx(expected_position(0, 2)[0])

    console.clear()
    assert label.destroyed and button.destroyed and not node.alive


def test_console_transform_moves_whole_grid(backend, console):
    node = backend.create_node()
    console.add_element(node)

    console.transform = Transform(translation=[0.0, 2.0, -1.0])

    assert console.transform is console.container.transform
    np.testing.assert_allclose(node.world_position(), [-1.5 * PITCH_X, 2.0, -1.0])


def test_console_transform_rotation_stands_grid_up(backend, ui, console):
    nodes = make_nodes(backend, 5)
    for node in nodes:
        console.add_element(node)

    console.transform = ui.host_to_local_transform(0, 0, 0, -90, 0, 0)

    # Row 1 sits below row 0 once the board is vertical
    assert nodes[4].world_position()[1] == pytest.approx(-PITCH_Z)
    assert nodes[4].world_position()[2] == pytest.approx(0.0, abs=1e-12)


def test_destroyed_node_cannot_take_a_slot(backend, console):
    node = backend.create_node()
    node.destroy()

    with pytest.raises(DestroyedError):
        console.add_element(node)

    assert console.slot_count == 0
    assert console.container.children == []
