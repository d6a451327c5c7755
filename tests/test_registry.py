import pytest

from asciiize.effects import AsciiParams, GreyscaleParams
from asciiize.errors import InvalidArgument
from asciiize.registry import EffectRegistry, EffectSpec, default_registry


def test_default_registry_contents():
    registry = default_registry()
    assert registry.names() == ["ascii", "greyscale"]
    assert registry["ascii"].params == AsciiParams(cell_size=7)
    assert registry[1].kind == "greyscale"


def test_default_registries_are_independent():
    first = default_registry()
    first.register(EffectSpec("coarse", AsciiParams(cell_size=16)))
    assert "coarse" not in default_registry()


def test_duplicate_names_rejected():
    registry = EffectRegistry([EffectSpec("ascii", AsciiParams())])
    with pytest.raises(InvalidArgument):
        registry.register(EffectSpec("ascii", GreyscaleParams()))
    assert len(registry) == 1


def test_lookup_errors():
    registry = default_registry()
    with pytest.raises(KeyError):
        registry["sepia"]
    with pytest.raises(IndexError):
        registry[5]


def test_iteration_keeps_registration_order():
    specs = [EffectSpec(name, AsciiParams(cell_size=size)) for name, size in [("b", 3), ("a", 9), ("c", 1)]]
    assert list(EffectRegistry(specs)) == specs


def test_apply_dispatches_on_params_kind(recording_surface):
    registry = default_registry()

    surface = recording_surface(14, 14, (255, 0, 0, 255))
    cells = registry["ascii"].apply(surface)
    assert len(cells) == 4

    surface = recording_surface(1, 1, (30, 90, 180, 255))
    assert registry["greyscale"].apply(surface) is None
    assert surface.data == bytearray((100, 100, 100, 255))
