"""Tests for the PanelUI facade: labels, buttons and deferred behavior setup."""

import numpy as np
import pytest

from panelgrid.backend import ButtonBehavior, MemoryBackend
from panelgrid.core import CollisionLayer, TextAnchor
from panelgrid.errors import BackendError, ValidationError
from panelgrid.ui import ElementSize, PanelUI, label_height

SIZE = ElementSize(height=0.125, width=0.5)


def test_host_to_local_transform_converts_degrees():
    xform = PanelUI.host_to_local_transform(1, 2, 3, -90, 45, 180)
    np.testing.assert_allclose(xform.translation, [1, 2, 3])
    np.testing.assert_allclose(xform.rotation, [-np.pi / 2, np.pi / 4, np.pi])
    np.testing.assert_allclose(xform.scale, [1, 1, 1])


def test_host_to_local_transform_defaults_to_no_rotation():
    xform = PanelUI.host_to_local_transform(0, 1, 0)
    np.testing.assert_allclose(xform.to_matrix()[:3, :3], np.eye(3))


def test_create_label_structure(ui):
    label = ui.create_label(SIZE, "Team Red", label_fill_pct=0.8)

    text_node = label.text_node
    assert text_node.parent is label.anchor
    assert text_node.text.anchor is TextAnchor.MIDDLE_CENTER
    assert text_node.text.height == pytest.approx(label_height("Team Red", SIZE, 0.8))
    np.testing.assert_allclose(text_node.transform.rotation, [np.pi / 2, 0, 0])
    # The container stays orientation-neutral
    np.testing.assert_allclose(label.transform.rotation, [0, 0, 0])


def test_create_label_node_props_override_defaults(ui):
    label = ui.create_label(SIZE, "x", node_props={"name": "score_text"})
    assert label.text_node.name == "score_text"


def test_create_label_under_parent(backend, ui):
    parent = backend.create_node()
    label = ui.create_label(SIZE, "x", parent=parent)
    assert label.parent is parent


@pytest.mark.parametrize("fill_pct", [0.0, -0.5, 1.5])
def test_invalid_fill_fraction(ui, fill_pct):
    with pytest.raises(ValidationError):
        ui.create_label(SIZE, "x", label_fill_pct=fill_pct)


def test_button_geometry_and_label_offset(ui):
    size = ElementSize(height=0.2, width=0.4, depth=0.05)
    button = ui.create_button(size, text="Go")

    np.testing.assert_allclose(button.node.mesh.extents, [0.4, 0.05, 0.2])
    assert button.node.collider is not None
    assert button.label.parent is button.node
    assert button.label.transform.translation[1] == pytest.approx(0.05 / 1.9)


def test_button_default_depth(ui):
    button = ui.create_button(SIZE, text="+")
    np.testing.assert_allclose(button.node.mesh.extents, [0.5, 0.01, 0.125])
    assert button.label.transform.translation[1] == pytest.approx(0.01 / 1.9)


def test_behaviors_attach_after_confirmation(backend, ui):
    material = backend.create_material("gray", (0.25, 0.25, 0.25))
    calls = []
    button = ui.create_button(
        SIZE,
        text="+",
        button_material=material,
        on_click=lambda user, event: calls.append(("click", user)),
    )

    assert button.node.behavior is None
    assert button.node.material is None
    assert button.node.collider.layer is CollisionLayer.DEFAULT

    backend.confirm()

    assert button.created().done()
    assert button.node.material is material
    assert button.node.collider.layer is CollisionLayer.HOLOGRAM
    button.node.behavior.trigger_click("alice")
    assert calls == [("click", "alice")]


def test_handlers_share_one_behavior(backend, ui):
    calls = []

    def record(name):
        return lambda user, event: calls.append((name, event.kind, event.state))

    button = ui.create_button(
        SIZE,
        on_click=record("click"),
        on_button=[("pressed", record("press")), ("released", record("release"))],
        on_hover=[("enter", record("enter")), ("exit", record("exit"))],
    )
    backend.confirm()

    behavior = button.node.behavior
    assert isinstance(behavior, ButtonBehavior)
    assert behavior.handler_count == 5

    behavior.trigger_button("pressed")
    behavior.trigger_button("released")
    behavior.trigger_hover("enter")
    behavior.trigger_button("holding")
    assert calls == [
        ("press", "button", "pressed"),
        ("release", "button", "released"),
        ("enter", "hover", "enter"),
    ]


def test_button_handlers_only(backend, ui):
    hits = []
    button = ui.create_button(SIZE, on_button=[("released", lambda u, e: hits.append(e.target))])
    backend.confirm()
    button.node.behavior.trigger_button("released")
    assert hits == [button.node]


def test_button_without_handlers_gets_no_behavior(backend, ui):
    button = ui.create_button(SIZE, text="idle")
    backend.confirm()
    assert button.node.behavior is None
    assert button.node.collider.layer is CollisionLayer.HOLOGRAM


def test_button_placed_before_confirmation(backend, ui, console):
    button = ui.create_button(SIZE, text="+", on_click=lambda u, e: None)
    console.add_element(button)

    assert button.parent is console.container
    assert button.node.behavior is None

    backend.confirm()
    assert button.node.behavior is not None
    assert button.parent is console.container


def test_destroy_before_confirmation_skips_setup(backend, ui):
    material = backend.create_material("gray", (0.25, 0.25, 0.25))
    button = ui.create_button(SIZE, text="+", button_material=material, on_click=lambda u, e: None)
    node = button.node

    button.destroy()
    assert node.created().cancelled()

    assert backend.confirm() == 0
    assert node.behavior is None
    assert node.material is None


def test_creation_failure_is_surfaced(backend, ui):
    button = ui.create_button(SIZE, on_click=lambda u, e: None)
    backend.fail(button.node)

    assert isinstance(button.created().exception(), BackendError)
    assert button.node.behavior is None
    assert button.node.alive


def test_auto_confirm_attaches_immediately():
    ui = PanelUI(MemoryBackend(auto_confirm=True))
    button = ui.create_button(SIZE, on_hover=[("hovering", lambda u, e: None)])
    assert button.node.behavior is not None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"on_button": [("clicked", lambda u, e: None)]},
        {"on_hover": [("leave", lambda u, e: None)]},
        {"label_fill_pct": 2.0},
    ],
)
def test_invalid_button_options_fail_fast(backend, ui, kwargs):
    with pytest.raises(ValidationError):
        ui.create_button(SIZE, **kwargs)
    assert backend.nodes == {}


def test_behavior_rejects_unknown_state(backend):
    node = backend.create_node()
    behavior = node.set_behavior(ButtonBehavior)
    assert node.set_behavior(ButtonBehavior) is behavior
    with pytest.raises(ValidationError):
        behavior.on_button("tapped", lambda u, e: None)
    with pytest.raises(ValidationError):
        behavior.trigger_hover("gone")


def test_button_node_props_cannot_remove_collider(ui):
    button = ui.create_button(SIZE, node_props={"name": "ok", "add_collider": False})
    assert button.node.name == "ok"
    assert button.node.collider is not None
