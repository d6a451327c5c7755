from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from asciiize.effects import EFFECTS, AsciiParams, GreyscaleParams
from asciiize.errors import InvalidArgument
from asciiize.sampling import Cell
from asciiize.surface import Surface

EffectParams = AsciiParams | GreyscaleParams


@dataclass(frozen=True)
class EffectSpec:
    name: str
    params: EffectParams

    @property
    def kind(self) -> str:
        return self.params.kind

    def apply(self, surface: Surface) -> list[Cell] | None:
        return EFFECTS[self.params.kind](surface, self.params)


class EffectRegistry:
    """Ordered collection of named effects, looked up by position or name."""

    def __init__(self, effects: Iterable[EffectSpec] = ()):
        self._effects: list[EffectSpec] = []
        for effect in effects:
            self.register(effect)

    def register(self, effect: EffectSpec) -> None:
        if effect.name in self.names():
            raise InvalidArgument(f"An effect named {effect.name!r} is already registered")
        self._effects.append(effect)

    def names(self) -> list[str]:
        return [effect.name for effect in self._effects]

    def __getitem__(self, key: int | str) -> EffectSpec:
        if isinstance(key, str):
            for effect in self._effects:
                if effect.name == key:
                    return effect
            raise KeyError(key)
        return self._effects[key]

    def __contains__(self, name: object) -> bool:
        return name in self.names()

    def __iter__(self) -> Iterator[EffectSpec]:
        return iter(self._effects)

    def __len__(self) -> int:
        return len(self._effects)


def default_registry() -> EffectRegistry:
    return EffectRegistry(
        [
            EffectSpec("ascii", AsciiParams(cell_size=7)),
            EffectSpec("greyscale", GreyscaleParams()),
        ]
    )
