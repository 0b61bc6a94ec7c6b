"""Tests for the operation registry."""

import pytest

import pnmkit.engine  # noqa: F401  registers the built-in operations
from pnmkit.engine.registry import OperationKind, OperationRegistry, OperationSpec, get_registry
from pnmkit.errors import OperationError
from pnmkit.models.header import PixelModel
from pnmkit.models.image import BitmapImage


def _noop(image):
    return image


def test_register_and_get():
    reg = OperationRegistry()
    spec = OperationSpec(name="noop", kind=OperationKind.TRANSFORM, fn=_noop)
    reg.register(spec)
    assert reg.get("noop") is spec
    assert "noop" in reg
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = OperationRegistry()
    reg.register(OperationSpec(name="noop", kind=OperationKind.TRANSFORM, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(OperationSpec(name="noop", kind=OperationKind.DRAWING, fn=_noop))


def test_unknown_name():
    with pytest.raises(OperationError, match="Unknown operation"):
        OperationRegistry().get("missing")


def test_by_kind_sorted():
    reg = OperationRegistry()
    reg.register(OperationSpec(name="b", kind=OperationKind.DRAWING, fn=_noop))
    reg.register(OperationSpec(name="a", kind=OperationKind.DRAWING, fn=_noop))
    reg.register(OperationSpec(name="c", kind=OperationKind.TRANSFORM, fn=_noop))
    assert [s.name for s in reg.by_kind(OperationKind.DRAWING)] == ["a", "b"]
    assert len(reg.all()) == 3


def test_check_model():
    spec = OperationSpec(
        name="grey_only",
        kind=OperationKind.TRANSFORM,
        fn=_noop,
        models=frozenset({PixelModel.GREYSCALE}),
    )
    with pytest.raises(OperationError, match="bitmap"):
        spec.check_model(BitmapImage.blank(1, 1))


def test_builtin_operations_registered():
    reg = get_registry()
    transforms = {s.name for s in reg.by_kind(OperationKind.TRANSFORM)}
    conversions = {s.name for s in reg.by_kind(OperationKind.CONVERSION)}
    drawing = {s.name for s in reg.by_kind(OperationKind.DRAWING)}
    assert transforms == {"flip", "flop", "rotate90cw", "invert", "set_max_value", "set_magic_number"}
    assert conversions == {"color_to_greyscale", "greyscale_to_bitmap", "color_to_bitmap"}
    assert drawing == {
        "line",
        "rectangle",
        "filled_rectangle",
        "circle",
        "filled_circle",
        "triangle",
        "filled_triangle",
        "polygon",
        "filled_polygon",
    }
    assert reg.get("circle").configurable
    assert reg.get("set_max_value").models == frozenset({PixelModel.GREYSCALE, PixelModel.COLOR})
