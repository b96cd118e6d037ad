"""Decode-result variants consumed by renderers.

Decoding a genome yields a flat stream of three kinds of value:

* :class:`ScalarValue` for configuration proteins (frame rate, background...)
* :class:`DrawInstruction` for drawable proteins, one per sibling instance
* :class:`SetupParams`, assembled from the scalar values by :func:`assemble`

The engine never touches a canvas. A renderer receives a :class:`Phenotype`
and is free to replay it as many times as it likes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Protocol, Union

DEFAULT_FRAME_RATE = 60.0
DEFAULT_BACKGROUND = (204.0, 204.0, 204.0)


@dataclass(frozen=True)
class ScalarValue:
    name: str
    value: Any
    raw: str
    kind: Literal["scalar"] = "scalar"


@dataclass(frozen=True)
class DrawInstruction:
    shape: str
    index: int
    siblings: int
    params: dict = field(default_factory=dict, hash=False)
    kind: Literal["draw"] = "draw"


@dataclass(frozen=True)
class SetupParams:
    frame_rate: float = DEFAULT_FRAME_RATE
    background: tuple[float, float, float] = DEFAULT_BACKGROUND
    animated: bool = False
    kind: Literal["setup"] = "setup"


PhenotypeValue = Union[ScalarValue, DrawInstruction, SetupParams]


@dataclass(frozen=True)
class Phenotype:
    """Everything a renderer needs to paint one chromosome."""

    setup: SetupParams
    instructions: tuple[DrawInstruction, ...]
    scalars: tuple[ScalarValue, ...] = ()

    def as_dict(self) -> dict:
        return {
            "setup": {
                "frame_rate": self.setup.frame_rate,
                "background": list(self.setup.background),
                "animated": self.setup.animated,
            },
            "instructions": [
                {"shape": i.shape, "index": i.index, "siblings": i.siblings, **i.params} for i in self.instructions
            ],
            "scalars": {s.name: s.value for s in self.scalars},
        }


class Renderer(Protocol):
    def render(self, phenotype: Phenotype) -> Any:
        ...


def _is_animated(scalars: dict[str, ScalarValue]) -> bool:
    drawing = scalars.get("drawing")
    frame_rate = scalars.get("frame_rate")
    if drawing is None or len(drawing.raw) < 2:
        return False
    if frame_rate is not None and frame_rate.raw == "00":
        return False
    return int(drawing.raw[0]) < 5 and int(drawing.raw[1]) < 5


def assemble(values: Iterable[PhenotypeValue]) -> Phenotype:
    """Fold a decoded value stream into setup parameters and draw calls."""
    scalars: dict[str, ScalarValue] = {}
    instructions: list[DrawInstruction] = []
    for value in values:
        if isinstance(value, ScalarValue):
            scalars[value.name] = value
        elif isinstance(value, DrawInstruction):
            instructions.append(value)
    setup = SetupParams(
        frame_rate=float(scalars["frame_rate"].value) if "frame_rate" in scalars else DEFAULT_FRAME_RATE,
        background=tuple(scalars["background"].value) if "background" in scalars else DEFAULT_BACKGROUND,
        animated=_is_animated(scalars),
    )
    return Phenotype(setup=setup, instructions=tuple(instructions), scalars=tuple(scalars.values()))
